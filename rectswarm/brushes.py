'''
Brushes are the fixed set of styles that mesh points refer to by index.

A mesh point whose style ref is `i < MAX_BRUSHES` is painted with brush
`i`'s fill color, refs in `[MAX_BRUSHES, 2*MAX_BRUSHES)` are the border
variant of brush `i - MAX_BRUSHES`.

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
from math import sqrt

import numpy as np

MAX_BRUSHES = 16
BORDER_SHADE = 0.6 #border color is the fill color scaled by this

Point = namedtuple('Point',('x','y'))
Color = namedtuple('Color',('r','g','b'))
Brush = namedtuple('Brush',('direction','half_width','color'))

COLORS = (
    Color(0.94, 0.31, 0.31), # Red
    Color(0.31, 0.94, 0.31), # Green
    Color(0.31, 0.31, 0.94), # Blue
    Color(0.94, 0.94, 0.31), # Yellow
    Color(0.94, 0.63, 0.31), # Orange
    Color(0.63, 0.31, 0.94), # Purple
    Color(0.31, 0.94, 0.94), # Cyan
    Color(0.94, 0.31, 0.94), # Magenta
    Color(0.63, 0.63, 0.63), # Gray
    Color(0.94, 0.75, 0.31), # Gold
    Color(0.75, 0.31, 0.94), # Violet
    Color(0.31, 0.94, 0.63), # Spring Green
    Color(0.94, 0.31, 0.63), # Pink
    Color(0.63, 0.94, 0.31), # Lime Green
    Color(0.94, 0.94, 0.94), # White
    Color(0.31, 0.31, 0.31), # Black
)

assert len(COLORS) == MAX_BRUSHES, "palette must fill the brush table"

_a = 1/sqrt(2)
DIRECTIONS = (Point(_a,_a), Point(_a,-_a))

def create_set():
    '''build the brush table: directions and colors cycle, width is fixed'''
    return tuple(Brush(direction=DIRECTIONS[i % len(DIRECTIONS)],
                       half_width=1.0,
                       color=COLORS[i])
                 for i in range(MAX_BRUSHES))

def as_array(brushes):
    '''pack brushes as rows of [dx, dy, half_width, r, g, b, 0, 0]

    8 floats per brush keeps every row 16 byte aligned for a uniform block'''
    packed = np.zeros((len(brushes),8),dtype=np.float32)
    for row, brush in zip(packed,brushes):
        row[:2] = brush.direction
        row[2] = brush.half_width
        row[3:6] = brush.color
    return packed

def style_colors(brushes,shade=BORDER_SHADE):
    '''return a (2N,3) lookup table, indexed by mesh style refs'''
    fill = np.array([brush.color for brush in brushes],dtype=np.float32)
    border = fill*np.float32(shade)
    return np.concatenate((fill,border))
