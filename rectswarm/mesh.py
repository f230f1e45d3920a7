'''
Mesh: points, a style ref per point, and triangle indices into the points.

Meshes only grow by appending another mesh, which shifts the appended
indices by the number of points already held.  After the scene is built
the lengths stay fixed and only point values are rewritten.

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
import numpy as np

from .components import ArrayComponent

POINT_DTYPE = np.float32
INDEX_DTYPE = np.uint32

class Mesh(object):

    def __init__(self,points=(),style_refs=(),indices=(),capacity=0,
                 index_capacity=None):
        if index_capacity is None:
            index_capacity = 3*capacity
        self._points = ArrayComponent('points',(2,),POINT_DTYPE,capacity)
        self._style_refs = ArrayComponent('style_refs',(1,),INDEX_DTYPE,capacity)
        self._indices = ArrayComponent('indices',(1,),INDEX_DTYPE,index_capacity)
        if len(points):
            self._points.extend(np.asarray(points,dtype=POINT_DTYPE).reshape(-1,2))
        if len(style_refs):
            self._style_refs.extend(style_refs)
        if len(indices):
            self._indices.extend(indices)
        assert len(self._points) == len(self._style_refs), \
            "every point needs a style ref"

    @classmethod
    def with_capacity(cls,point_capacity,index_capacity=None):
        '''empty mesh with room for point_capacity points, so that
        appending that many does not reallocate'''
        return cls(capacity=point_capacity,index_capacity=index_capacity)

    @property
    def points(self):
        '''(n,2) float32 view of the live point buffer'''
        return self._points.filled

    @property
    def style_refs(self):
        return self._style_refs.filled

    @property
    def indices(self):
        return self._indices.filled

    @property
    def triangle_count(self):
        return len(self._indices)//3

    def __len__(self):
        return len(self._points)

    def flat_points(self):
        '''points as x0,y0,x1,y1,... (a view, not a copy)'''
        return self._points.filled.reshape(-1)

    def append(self,other):
        '''append other onto this mesh, rebasing its indices past the points
        already here.  other should not be used afterwards.'''
        offset = len(self._points)
        indices = np.asarray(other.indices,dtype=INDEX_DTYPE)
        assert len(indices) % 3 == 0, "appended indices must be triangles"
        assert len(other.points) == len(other.style_refs), \
            "every appended point needs a style ref"
        assert not len(indices) or int(indices.max()) < len(other.points), \
            "appended index out of range"
        self._points.extend(other.points)
        self._style_refs.extend(other.style_refs)
        self._indices.extend(indices+INDEX_DTYPE(offset))

    def truncate(self,point_count):
        '''drop points from point_count on and every triangle touching them.

        Only valid when the triangles of the kept points come before the
        triangles of the dropped ones, which is how appending lays them out'''
        indices = self.indices
        #first triangle that references a dropped point
        tris = indices.reshape(-1,3)
        dropped = np.nonzero((tris >= point_count).any(axis=1))[0]
        keep = dropped[0] if len(dropped) else len(tris)
        assert not (tris[keep:] < point_count).all(axis=1).any(), \
            "kept triangles must precede dropped ones"
        self._points.truncate(point_count)
        self._style_refs.truncate(point_count)
        self._indices.truncate(3*keep)

    def check(self):
        '''assert the mesh invariants'''
        assert len(self._points) == len(self._style_refs), \
            "points and style refs differ in length"
        assert len(self._indices) % 3 == 0, "indices must be triangles"
        assert not len(self._indices) or \
            int(self.indices.max()) < len(self._points), "index out of range"
        return True

    def __repr__(self):
        return "<Mesh: %s points, %s triangles>"%(len(self),self.triangle_count)
