'''
Scene: a population of rects bouncing around a canvas, and the one mesh
that draws all of them.

Entities are stored column wise, one numpy array per component, the way
a system wants to see them:

    positions   (count,2) float32   top left corner of each rect
    velocities  (count,2) float32   canvas units per TIME_STEP
    sizes       (count,2) float32   width, height
    styles      (count,)  uint32    brush index, ordinal % MAX_BRUSHES

Entity i owns mesh.points[12*i:12*i+12].  The per frame update broadcasts
positions onto those points through `owners`, an index array mapping every
mesh point back to the entity it belongs to.

This file is part of Rect-Swarm.
Copyright (C) 2016 Elliot Hallmark (permafacture@gmail.com)

Rect-Swarm is free software: you can redistribute it and/or modify
it under the terms of the GNU General Public License as published by
the Free Software Foundation, either version 2 of the License, or
(at your option) any later version.

Rect-Swarm is distributed in the hope that it will be useful,
but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
GNU General Public License for more details.

You should have received a copy of the GNU General Public License
along with this program.  If not, see <http://www.gnu.org/licenses/>.
'''
import logging

import numpy as np

from .brushes import MAX_BRUSHES
from .mesh import Mesh, POINT_DTYPE, INDEX_DTYPE
from .shapes import Rect, OUTLINE_POINTS, RECT_INDICES, local_outlines, mesh_batch
from .accessors import AccessorFactory

logger = logging.getLogger(__name__)

CELL_DIVISOR = 32      #largest rect side is canvas side // CELL_DIVISOR
MIN_CELL_RATIO = 4     #smallest rect side is largest // MIN_CELL_RATIO
TIME_STEP = 50.0
VELOCITY_SPREAD = 0.1  #velocity components are uniform in +-VELOCITY_SPREAD/2
MIN_CANVAS = CELL_DIVISOR*MIN_CELL_RATIO  #smaller leaves no room for a 1 unit rect


def _check_canvas(width,height):
    for name, value in (('width',width),('height',height)):
        if int(value) != value or value < MIN_CANVAS:
            raise ValueError("canvas %s must be a whole number >= %s, got %r"
                             %(name,MIN_CANVAS,value))

def _check_count(count):
    if int(count) != count or count < 1:
        raise ValueError("entity count must be a positive integer, got %r"
                         %(count,))


class Scene(object):
    '''owns every entity and the aggregate mesh.  Build with Scene.random'''

    component_names = ('position','velocity','size','style')

    def __init__(self,width,height,stroke,positions,velocities,sizes,styles,
                 random_state=None):
        _check_canvas(width,height)
        if stroke < 0:
            raise ValueError("stroke must not be negative, got %r"%(stroke,))
        self.width = float(width)
        self.height = float(height)
        self.stroke = float(stroke)
        self.positions = np.array(positions,dtype=POINT_DTYPE).reshape(-1,2)
        self.velocities = np.array(velocities,dtype=POINT_DTYPE).reshape(-1,2)
        self.sizes = np.array(sizes,dtype=POINT_DTYPE).reshape(-1,2)
        self.styles = np.array(styles,dtype=INDEX_DTYPE).reshape(-1)
        count = len(self.positions)
        _check_count(count)
        assert count == len(self.velocities) == len(self.sizes) == len(self.styles),\
            "every entity needs a position, velocity, size and style"
        if not (self.styles < MAX_BRUSHES).all():
            raise ValueError("style indices must be < %s, got %r"
                             %(MAX_BRUSHES,int(self.styles.max())))

        self._random = random_state or np.random.RandomState()
        self._bounds = np.array((self.width,self.height),dtype=POINT_DTYPE)
        self.count = count
        self.new_count = count
        self.generation = 0

        self.mesh = Mesh.with_capacity(OUTLINE_POINTS*count,
                                       len(RECT_INDICES)*count)
        self.mesh.append(mesh_batch(self.sizes,self.styles,self.positions,
                                    self.stroke))
        self._rebuild_lookups()
        self.EntityAccessor = AccessorFactory(self).generate_accessor()

    @classmethod
    def random(cls,width,height,stroke,count,seed=None):
        '''a scene of `count` rects scattered over a width x height canvas'''
        _check_canvas(width,height)
        _check_count(count)
        random_state = np.random.RandomState(seed)
        width, height = int(width), int(height)
        columns = cls._sample(random_state,width,height,0,count)
        logger.info("random scene: %s rects on %sx%s canvas",count,width,height)
        return cls(width,height,stroke,*columns,random_state=random_state)

    @staticmethod
    def _sample(random_state,width,height,first,count):
        '''sample positions, velocities, sizes and styles for entities
        first..first+count'''
        max_cell = np.array((width//CELL_DIVISOR,height//CELL_DIVISOR))
        min_cell = max_cell//MIN_CELL_RATIO
        randint = random_state.randint

        positions = np.empty((count,2),dtype=POINT_DTYPE)
        positions[:,0] = randint(0,width-max_cell[0],size=count)
        positions[:,1] = randint(0,height-max_cell[1],size=count)

        velocities = VELOCITY_SPREAD*(random_state.random_sample((count,2))-0.5)

        sizes = np.empty((count,2),dtype=POINT_DTYPE)
        sizes[:,0] = randint(min_cell[0],max_cell[0],size=count)
        sizes[:,1] = randint(min_cell[1],max_cell[1],size=count)

        styles = np.arange(first,first+count) % MAX_BRUSHES
        return positions, velocities.astype(POINT_DTYPE), sizes, styles

    def _rebuild_lookups(self):
        '''data derived from sizes and stroke that the update reuses'''
        self._local = local_outlines(self.sizes,self.stroke).reshape(-1,2)
        self._owners = np.repeat(np.arange(self.count),OUTLINE_POINTS)
        #scratch space for update, sized with the population
        self._gathered = np.empty_like(self._local)
        self._step = np.empty_like(self.positions)
        self._outward = np.empty(self.positions.shape,dtype=bool)
        self._past = np.empty(self.positions.shape,dtype=bool)
        self._heading = np.empty(self.positions.shape,dtype=bool)
        self.mesh.check()
        assert len(self.mesh) == OUTLINE_POINTS*self.count, \
            "mesh does not hold 12 points per entity"

    @property
    def rects(self):
        return [self.rect(i) for i in range(self.count)]

    def rect(self,i):
        w, h = self.sizes[i]
        return Rect(int(w),int(h),int(self.styles[i]))

    def entity(self,i):
        '''object interface onto entity i'''
        if not 0 <= i < self.count:
            raise IndexError("entity %s not in scene of %s"%(i,self.count))
        return self.EntityAccessor(i)

    def update(self,dt=TIME_STEP):
        '''advance every entity one frame and rewrite the mesh points.
        Works entirely in preallocated buffers.'''
        pos = self.positions
        vel = self.velocities
        outward = self._outward
        past = self._past
        heading = self._heading

        #reflect only while still heading out, so an overshoot comes back
        np.greater(pos,self._bounds,out=past)
        np.greater(vel,0,out=heading)
        np.logical_and(past,heading,out=outward)
        np.less(pos,0,out=past)
        np.less(vel,0,out=heading)
        np.logical_and(past,heading,out=past)
        np.logical_or(outward,past,out=outward)
        np.negative(vel,out=vel,where=outward)

        np.multiply(vel,POINT_DTYPE(dt),out=self._step)
        pos += self._step

        np.take(pos,self._owners,axis=0,out=self._gathered,mode='clip')
        np.add(self._local,self._gathered,out=self.mesh.points)

    def refresh(self,i):
        '''rewrite the outline of entity i from its current position'''
        self.rect(i).refresh_in_place(self.positions[i],self.stroke,i,self.mesh)

    def request_count_change(self,new_count):
        '''remember a new population size.  Nothing is resized until
        apply_count_change, so buffers handed to a renderer stay valid.'''
        _check_count(new_count)
        self.new_count = int(new_count)
        logger.info("count %s requested (have %s)",self.new_count,self.count)

    def apply_count_change(self):
        '''grow or shrink to the requested count.  Returns True if buffer
        lengths changed, in which case everything must be re-uploaded.'''
        new_count, count = self.new_count, self.count
        if new_count == count:
            return False
        if new_count > count:
            self._grow(new_count-count)
        else:
            self._shrink(new_count)
        self.count = new_count
        self.generation += 1
        self._rebuild_lookups()
        logger.info("count changed %s -> %s",count,new_count)
        return True

    def _grow(self,n):
        width, height = int(self.width), int(self.height)
        positions, velocities, sizes, styles = self._sample(
            self._random,width,height,self.count,n)
        self.positions = np.concatenate((self.positions,positions))
        self.velocities = np.concatenate((self.velocities,velocities))
        self.sizes = np.concatenate((self.sizes,sizes))
        self.styles = np.concatenate((self.styles,styles.astype(INDEX_DTYPE)))
        self.mesh.append(mesh_batch(sizes,styles,positions,self.stroke))

    def _shrink(self,n):
        self.positions = self.positions[:n].copy()
        self.velocities = self.velocities[:n].copy()
        self.sizes = self.sizes[:n].copy()
        self.styles = self.styles[:n].copy()
        self.mesh.truncate(OUTLINE_POINTS*n)

    def __repr__(self):
        return "<Scene: %s rects on %sx%s>"%(self.count,self.width,self.height)
