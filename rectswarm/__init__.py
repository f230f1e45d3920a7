'''
Rect-Swarm: many bordered rectangles bouncing around a canvas, kept in one
triangle mesh.

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
from .brushes import MAX_BRUSHES, Point, Color, Brush, create_set
from .mesh import Mesh
from .shapes import Rect
from .scene import Scene
from .camera import Camera, projection_matrix
from .painter import Painter, GeometryPainter
