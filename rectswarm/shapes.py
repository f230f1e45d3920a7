'''
Rect geometry: the 12 point bordered outline and its fixed triangulation.

Outline layout for a rect anchored at its top left corner p0:

    q0-------------------q3
    | g0---------------g3 |
    |  p0-------------p3  |
    |  |               |  |
    |  p1-------------p2  |
    | g1---------------g2 |
    q1-------------------q2

p is the body, q is `border` outside of it and g is `border` inside of it.
The ring between q and g is the border, drawn with the paired border style.

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
from collections import namedtuple

import numpy as np

from .brushes import MAX_BRUSHES
from .mesh import Mesh, POINT_DTYPE, INDEX_DTYPE

OUTLINE_POINTS = 12

#clockwise, relative to the 12 point block
RECT_INDICES = np.array((
     0, 1, 3,   1, 2, 3,
     8, 4, 9,   9, 4, 5,
     5,10, 9,  10, 5, 6,
    10, 6,11,  11, 6, 7,
     7, 4, 8,   8,11, 7,
    ),dtype=INDEX_DTYPE)

#which of width,height each base corner adds to the anchor
_CORNERS = np.array(((0,0),(0,1),(1,1),(1,0)),dtype=POINT_DTYPE)
#direction away from the body for each corner
_OUTWARD = np.array(((-1,-1),(-1,1),(1,1),(1,-1)),dtype=POINT_DTYPE)

#style offset of each point: body points use the brush, ring points its border
_STYLE_OFFSETS = np.array((0,)*4 + (MAX_BRUSHES,)*8,dtype=INDEX_DTYPE)


def local_outlines(sizes,border):
    '''outlines of rects with the given (n,2) sizes, anchored at the origin.

    returns (n,12,2)'''
    sizes = np.asarray(sizes,dtype=POINT_DTYPE).reshape(-1,1,2)
    border = POINT_DTYPE(border)
    base = _CORNERS*sizes
    outer = base + _OUTWARD*border
    inner = base - _OUTWARD*border
    return np.concatenate((base,outer,inner),axis=1)

def outline_batch(sizes,anchors,border):
    '''outlines of many rects at once, (n,12,2)'''
    anchors = np.asarray(anchors,dtype=POINT_DTYPE).reshape(-1,1,2)
    return local_outlines(sizes,border) + anchors

def mesh_batch(sizes,styles,anchors,border):
    '''the mesh that results from appending each rect's mesh in order'''
    styles = np.asarray(styles,dtype=INDEX_DTYPE)
    n = len(styles)
    points = outline_batch(sizes,anchors,border).reshape(-1,2)
    style_refs = (styles.reshape(-1,1) + _STYLE_OFFSETS).reshape(-1)
    offsets = (np.arange(n,dtype=INDEX_DTYPE)*INDEX_DTYPE(OUTLINE_POINTS)).reshape(-1,1)
    indices = (RECT_INDICES + offsets).reshape(-1)
    return Mesh(points,style_refs,indices)


class Rect(namedtuple('Rect',('width','height','style_index'))):
    '''An axis aligned rectangle.  Has a size and a brush but no position:
    geometry is made for whatever anchor it is given.'''
    __slots__ = ()

    @property
    def size(self):
        return (self.width,self.height)

    def outline(self,anchor,border):
        '''the 12 outline points [p0..p3, q0..q3, g0..g3] as a (12,2) array'''
        return outline_batch((self.size,),(anchor,),border)[0]

    def triangulate(self,style_index=None):
        '''(indices, style_refs) for one rect.  indices never change,
        style_refs mark the body with the brush and the ring with its
        border variant'''
        if style_index is None:
            style_index = self.style_index
        assert 0 <= style_index < MAX_BRUSHES, "style index out of table"
        return RECT_INDICES.copy(), _STYLE_OFFSETS + INDEX_DTYPE(style_index)

    def mesh(self,anchor,border):
        indices, style_refs = self.triangulate()
        return Mesh(self.outline(anchor,border),style_refs,indices)

    def refresh_in_place(self,anchor,border,ordinal,mesh):
        '''overwrite this rect's 12 points in mesh, leaving everything else'''
        start = ordinal*OUTLINE_POINTS
        assert 0 <= start and start+OUTLINE_POINTS <= len(mesh), \
            "rect #%s has no points in %r"%(ordinal,mesh)
        mesh.points[start:start+OUTLINE_POINTS] = self.outline(anchor,border)
