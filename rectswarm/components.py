'''
Class that wraps a numpy array as a buffer, and provides for reserving
capacity, appending and truncating while handing out views of the
filled portion.

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

logger = logging.getLogger(__name__)

def _nearest_pow2(v):
    # From http://graphics.stanford.edu/~seander/bithacks.html#RoundUpPowerOf2
    # Credit: Sean Anderson
    if v <= 1:
        return 1
    v -= 1
    v |= v >> 1
    v |= v >> 2
    v |= v >> 4
    v |= v >> 8
    v |= v >> 16
    v |= v >> 32
    return v + 1

class ArrayComponent(object):
    '''holds a resize-able numpy array buffer and how much of it is in use'''

    def __init__(self,name,dim,dtype,size=0):
      ''' create a numpy array buffer of shape (size,)+dim with dtype==dtype'''
      self.name = name
      self.datatype = dtype #calling this dtype would be confusing because this is not a numpy array!
      self._dim = dim
      self.capacity = size
      self.length = 0
      if dim == (1,):
        self._buffer = np.zeros(size,dtype=dtype) #shape = (size,) not (size,1)
        self.resize = self._resize_singledim
      elif dim > (1,):
        self._buffer = np.zeros((size,)+dim,dtype=dtype) #shape = (size,dim)
        self.resize = self._resize_multidim
      else:
        raise ValueError('ArrayComponent dim must be >= 1')

    def assert_capacity(self,new_capacity):
        '''make certain Component is atleast `new_capacity` big.
        resizing if necessary.'''
        if self.capacity < new_capacity:
            capacity = _nearest_pow2(new_capacity)
            logger.debug("grow %s: %s -> %s",self.name,self.capacity,capacity)
            self.resize(capacity)
            self.capacity = capacity

    def extend(self,data):
        '''copy data onto the end of the filled portion, growing if needed'''
        data = np.asarray(data,dtype=self.datatype)
        n = len(data)
        start = self.length
        self.assert_capacity(start+n)
        self._buffer[start:start+n] = data
        self.length = start+n
        return slice(start,start+n,1)

    def truncate(self,length):
        assert 0 <= length <= self.length, \
            "cannot truncate %s from %s to %s"%(self.name,self.length,length)
        self.length = length

    @property
    def filled(self):
        '''view of the portion of the buffer that holds data'''
        return self._buffer[:self.length]

    def __len__(self):
      return self.length

    def __getitem__(self,selector):
      return self._buffer[:self.length][selector]

    def __setitem__(self,selector,data):
      self._buffer[:self.length][selector]=data
      assert self.datatype == self._buffer.dtype, 'numpy dtype may not change'

    def _resize_multidim(self,count):
      shape =(count,)+self._dim
      try:
         #resizing in place fails while views of the buffer are alive
         self._buffer.resize(shape)
      except ValueError:
         buf = np.zeros(shape,dtype=self.datatype)
         buf[:self.length] = self._buffer[:self.length]
         self._buffer = buf

    def _resize_singledim(self,count):
      try:
         self._buffer.resize(count)
      except ValueError:
         buf = np.zeros(count,dtype=self.datatype)
         buf[:self.length] = self._buffer[:self.length]
         self._buffer = buf

    def __repr__(self):
      return "<ArrayComponent: %s %s/%s>"%(self.name,self.length,self.capacity)
