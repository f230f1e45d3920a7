'''
GeometryPainter for pyglet: one shader program, one indexed vertex list.

Importing this module needs a working OpenGL library, the rest of the
package does not.

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

import pyglet
from pyglet import gl
from pyglet.graphics.shader import Shader, ShaderProgram

from .painter import GeometryPainter

logger = logging.getLogger(__name__)

vertex_source = """#version 330 core
in vec2 position;
in vec3 colors;
out vec3 vertex_color;

uniform mat4 projection;

void main()
{
    gl_Position = projection * vec4(position, 0.0, 1.0);
    vertex_color = colors;
}
"""

fragment_source = """#version 330 core
in vec3 vertex_color;
out vec4 final_color;

void main()
{
    final_color = vec4(vertex_color, 1.0);
}
"""


class PygletGeometryPainter(GeometryPainter):

    def __init__(self,scene,viewport_width,viewport_height):
        super(PygletGeometryPainter,self).__init__(scene,viewport_width,
                                                   viewport_height)
        self.program = None
        self.batch = None
        self.vertex_list = None

    def create_resources(self):
        '''call once the window (and so the GL context) exists'''
        self.program = ShaderProgram(Shader(vertex_source,'vertex'),
                                     Shader(fragment_source,'fragment'))
        self.batch = pyglet.graphics.Batch()
        logger.info("shader program ready")

    def upload_mesh(self,mesh,colors):
        if self.vertex_list is not None:
            self.vertex_list.delete()
        self.vertex_list = self.program.vertex_list_indexed(
            len(mesh), gl.GL_TRIANGLES, mesh.indices.tolist(),
            batch=self.batch,
            position=('f', mesh.flat_points().tolist()),
            colors=('f', colors.reshape(-1).tolist()))
        logger.info("uploaded %r",mesh)

    def upload_points(self,flat_points):
        self.vertex_list.position[:] = flat_points.tolist()

    def upload_projection(self,matrix):
        self.program.use()
        self.program['projection'] = tuple(float(x) for x in matrix)
        self.program.stop()

    def render(self):
        self.batch.draw()
