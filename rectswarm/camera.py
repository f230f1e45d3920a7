'''
Camera: where the viewport looks in the document and how close.

Document space has its origin top left with y growing down, clip space has
y growing up, so the projection flips y.

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

from .brushes import Point

logger = logging.getLogger(__name__)


def _check_positive(name,value):
    if not value > 0:
        raise ValueError("%s must be positive, got %r"%(name,value))


def view_bounds(camera,doc_width,doc_height):
    '''(left, right, top, bottom) of the document region in view'''
    _check_positive('document width',doc_width)
    _check_positive('document height',doc_height)
    aspect = doc_width/doc_height
    scaled_width = camera.viewport_height*aspect/camera.zoom
    scaled_height = camera.viewport_height/camera.zoom
    x, y = camera.pan
    return (x - scaled_width*0.5, x + scaled_width*0.5,
            y - scaled_height*0.5, y + scaled_height*0.5)

def projection_matrix(camera,doc_width,doc_height):
    '''column major 4x4 orthographic projection from document to clip space'''
    left, right, top, bottom = view_bounds(camera,doc_width,doc_height)
    return np.array((
        2.0/(right-left), 0.0, 0.0, 0.0,
        0.0, 2.0/(top-bottom), 0.0, 0.0,
        0.0, 0.0, -1.0, 0.0,
        -(right+left)/(right-left), -(top+bottom)/(top-bottom), 0.0, 1.0,
        ),dtype=np.float32)


class Camera(object):
    '''pan, zoom and viewport size.  Every request marks the camera dirty
    and the projection is rebuilt once, the next time it is asked for.'''

    def __init__(self,viewport_width,viewport_height,pan=None,zoom=1.0):
        _check_positive('viewport width',viewport_width)
        _check_positive('viewport height',viewport_height)
        _check_positive('zoom',zoom)
        self.viewport_width = float(viewport_width)
        self.viewport_height = float(viewport_height)
        if pan is None:
            pan = (0.5*self.viewport_width,0.5*self.viewport_height)
        self.pan = Point(float(pan[0]),float(pan[1]))
        self.zoom = float(zoom)
        self.dirty = True

    def request_pan(self,pan):
        self.pan = Point(float(pan[0]),float(pan[1]))
        self.dirty = True
        logger.debug("pan %s,%s",*self.pan)

    def request_zoom(self,zoom):
        _check_positive('zoom',zoom)
        self.zoom = float(zoom)
        self.dirty = True
        logger.debug("zoom %s",self.zoom)

    def zoom_by(self,factor):
        self.request_zoom(self.zoom*factor)

    def request_resize(self,width,height):
        _check_positive('viewport width',width)
        _check_positive('viewport height',height)
        self.viewport_width = float(width)
        self.viewport_height = float(height)
        self.dirty = True
        logger.debug("viewport %sx%s",width,height)

    def pixels_to_document(self,dx,dy,doc_width,doc_height):
        '''document space distance covered by a dx,dy pixel drag.
        Pixel y grows up, so dy flips.'''
        left, right, top, bottom = view_bounds(self,doc_width,doc_height)
        return Point(dx*(right-left)/self.viewport_width,
                     -dy*(bottom-top)/self.viewport_height)

    def projection_matrix(self,doc_width,doc_height):
        return projection_matrix(self,doc_width,doc_height)

    def projection_matrix_if_dirty(self,doc_width,doc_height):
        '''the projection if anything changed since last asked, else None'''
        if not self.dirty:
            return None
        self.dirty = False
        return projection_matrix(self,doc_width,doc_height)

    def __repr__(self):
        return "<Camera: pan %s,%s zoom %s>"%(self.pan.x,self.pan.y,self.zoom)
