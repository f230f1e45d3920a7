'''
Settings for a run: canvas and population, window size, logging.

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
import argparse
from collections import namedtuple

SceneConfig = namedtuple('SceneConfig',('canvas_width','canvas_height',
    'stroke','count','window_width','window_height','seed','log_level'))

DEFAULTS = SceneConfig(canvas_width=1000,
                       canvas_height=1000,
                       stroke=1.0,
                       count=100,
                       window_width=800,
                       window_height=600,
                       seed=None,
                       log_level='INFO')

def build_parser(defaults=DEFAULTS):
    parser = argparse.ArgumentParser(
        description="Animate a swarm of bordered rectangles")
    parser.add_argument('--canvas',type=int,nargs=2,metavar=('WIDTH','HEIGHT'),
                        default=(defaults.canvas_width,defaults.canvas_height),
                        help="document size the rects bounce around in")
    parser.add_argument('--stroke',type=float,default=defaults.stroke,
                        help="border thickness")
    parser.add_argument('-n','--count',type=int,default=defaults.count,
                        help="number of rects")
    parser.add_argument('--window',type=int,nargs=2,metavar=('WIDTH','HEIGHT'),
                        default=(defaults.window_width,defaults.window_height))
    parser.add_argument('--seed',type=int,default=defaults.seed,
                        help="seed for a reproducible scene")
    parser.add_argument('--log-level',default=defaults.log_level,
                        choices=('DEBUG','INFO','WARNING','ERROR'))
    return parser

def parse_args(argv=None):
    '''SceneConfig from command line arguments'''
    args = build_parser().parse_args(argv)
    return SceneConfig(canvas_width=args.canvas[0],
                       canvas_height=args.canvas[1],
                       stroke=args.stroke,
                       count=args.count,
                       window_width=args.window[0],
                       window_height=args.window[1],
                       seed=args.seed,
                       log_level=args.log_level)
