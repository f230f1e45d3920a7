'''
Painters turn a scene into pixels.  The frame logic lives here, free of
any graphics library: subclasses supply the upload and draw calls.

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
from . import brushes
from .camera import Camera


class Painter(object):
    '''what a window needs from anything that draws into it'''

    def draw(self):
        raise NotImplementedError

    def resize(self,width,height):
        raise NotImplementedError

    def set_scale(self,scale):
        raise NotImplementedError

    def set_pan(self,pan):
        raise NotImplementedError


class GeometryPainter(Painter):
    '''draws a Scene through a Camera.

    Graphics resources usually can't exist until a window does, so a
    GeometryPainter starts out not ready.  The scene keeps animating either
    way; only the render calls wait for initialize().'''

    def __init__(self,scene,viewport_width,viewport_height):
        self.scene = scene
        self.camera = Camera(viewport_width,viewport_height)
        self.brushes = brushes.create_set()
        self.color_table = brushes.style_colors(self.brushes)
        self.ready = False
        self._generation = None

    def point_colors(self):
        '''(n,3) color per mesh point, looked up through its style ref'''
        return self.color_table[self.scene.mesh.style_refs]

    def initialize(self):
        self.create_resources()
        self.ready = True

    def frame(self):
        '''advance the scene one step and draw it.  Runs on the thread that
        owns the scene, so a draw never sees a half updated mesh.'''
        scene = self.scene
        scene.apply_count_change()
        scene.update()
        if self.ready:
            self.draw()

    def draw(self):
        scene = self.scene
        if self._generation != scene.generation:
            #lengths changed (or first draw): upload everything
            self.upload_mesh(scene.mesh,self.point_colors())
            self._generation = scene.generation
        else:
            self.upload_points(scene.mesh.flat_points())
        matrix = self.camera.projection_matrix_if_dirty(scene.width,scene.height)
        if matrix is not None:
            self.upload_projection(matrix)
        self.render()

    def resize(self,width,height):
        self.camera.request_resize(width,height)

    def set_scale(self,scale):
        self.camera.request_zoom(scale)

    def set_pan(self,pan):
        self.camera.request_pan(pan)

    #hooks for the graphics library

    def create_resources(self):
        pass

    def upload_mesh(self,mesh,colors):
        raise NotImplementedError

    def upload_points(self,flat_points):
        raise NotImplementedError

    def upload_projection(self,matrix):
        raise NotImplementedError

    def render(self):
        raise NotImplementedError
