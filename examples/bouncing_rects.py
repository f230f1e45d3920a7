'''
Rect-Swarm example: rects bouncing around a canvas.

  drag        pan
  scroll      zoom
  up / down   double / halve the number of rects

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
from pyglet.window import key

from rectswarm import Scene
from rectswarm.config import parse_args
from rectswarm.pyglet_painter import PygletGeometryPainter

ZOOM_STEP = 1.1

if __name__ == '__main__':
    config = parse_args()
    logging.basicConfig(level=config.log_level,
                        format='%(asctime)s %(name)s %(levelname)s: %(message)s')

    #the scene exists before any window does
    scene = Scene.random(config.canvas_width,config.canvas_height,
                         config.stroke,config.count,seed=config.seed)

    window = pyglet.window.Window(config.window_width,config.window_height,
                                  resizable=True,vsync=False)
    fps_display = pyglet.window.FPSDisplay(window)
    painter = PygletGeometryPainter(scene,*window.get_framebuffer_size())
    painter.set_pan((0.5*scene.width,0.5*scene.height))
    painter.initialize()

    @window.event
    def on_draw():
        window.clear()
        painter.frame()
        fps_display.draw()

    @window.event
    def on_resize(width,height):
        painter.resize(*window.get_framebuffer_size())

    @window.event
    def on_mouse_drag(x,y,dx,dy,buttons,modifiers):
        camera = painter.camera
        delta = camera.pixels_to_document(dx,dy,scene.width,scene.height)
        painter.set_pan((camera.pan.x-delta.x,camera.pan.y-delta.y))

    @window.event
    def on_mouse_scroll(x,y,scroll_x,scroll_y):
        painter.set_scale(painter.camera.zoom*ZOOM_STEP**scroll_y)

    @window.event
    def on_key_press(symbol,modifiers):
        if symbol == key.UP:
            scene.request_count_change(scene.new_count*2)
        elif symbol == key.DOWN:
            scene.request_count_change(max(1,scene.new_count//2))

    pyglet.clock.schedule(lambda _: None)
    pyglet.app.run()
