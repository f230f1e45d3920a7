'''
Accessors provide an object oriented interface for a specific
entity (ordinal) by providing an object with attributes
that access the scene's array rows for that entity under
the hood

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
from .shapes import OUTLINE_POINTS

#component name -> name of the scene array holding it
ARRAY_NAMES = {'position':'positions',
               'velocity':'velocities',
               'size':'sizes',
               'style':'styles'}
#rects never change shape, so only motion can be written
WRITABLE = ('position','velocity')


class Accessor(object):
    '''
    Accessors provide an object oriented interface for a specific
    entity by providing an object with attributes that read and write
    the scene's arrays at that entity's row.'''

    def __init__(self,ordinal):
      # self._scene is provided by the factory
      self._ordinal = ordinal

    @property
    def ordinal(self):
        return self._ordinal

    @property
    def rect(self):
        return self._scene.rect(self._ordinal)

    @property
    def outline(self):
        '''this entity's 12 points in the scene mesh (a view)'''
        start = self._ordinal*OUTLINE_POINTS
        return self._scene.mesh.points[start:start+OUTLINE_POINTS]

    def __repr__(self):
      return "<Accessor for entity #%s>"%(self._ordinal,)


class AccessorFactory(object):

    def __init__(self,scene):
        self.scene=scene

    def attribute_getter_factory(self, component_name):
          '''generate a getter for this component_name into the scene's arrays'''
          array_name = ARRAY_NAMES[component_name]
          def getter(accessor, name=array_name):
            #look the array up every time, count changes replace them
            return getattr(accessor._scene,name)[accessor._ordinal]
          return getter

    def attribute_setter_factory(self, component_name):
          '''generate a setter using this accessor's ordinal into the scene's
          arrays.  Setting a position redraws the entity's outline.'''
          array_name = ARRAY_NAMES[component_name]
          refresh = component_name == 'position'
          def setter(accessor, data, name=array_name, refresh=refresh):
            scene = accessor._scene
            getattr(scene,name)[accessor._ordinal] = data
            if refresh:
                scene.refresh(accessor._ordinal)
          return setter

    def generate_accessor(self):
        '''return an EntityAccessor class that can be instatiated with an
        ordinal to provide an object oriented interface with the data
        associated with that entity'''
        NewAccessor = type('EntityAccessor',(Accessor,),{})

        getter = self.attribute_getter_factory
        setter = self.attribute_setter_factory
        for name in self.scene.component_names:
            if name in WRITABLE:
                setattr(NewAccessor,name,property(getter(name), setter(name)))
            else:
                setattr(NewAccessor,name,property(getter(name)))
        NewAccessor._scene = self.scene
        return NewAccessor
