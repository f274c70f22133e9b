## turtle position and orthonormal orientation frame for turtle3d
## Copyright (c) 2020 Richard W. DeVaul
## Copyright (c) 2020 yapCAD contributors
## All rights reserved

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

from math import *

import turtle3d.vec as vec
from turtle3d.errors import InvalidArgumentError, InvalidFrameError

## A turtle frame is a position plus an orthonormal pair of unit
## vectors, the heading (forward) and the normal (up).  The third
## axis, left = normal x heading, is derived whenever it is needed and
## never stored, so it can never drift out of step with the other two.

## In turtle space the first axis is the drawing surface's vertical
## axis and the second is its horizontal axis, so the canonical
## heading [0,1,0] faces right on screen.

HEADING0 = [0.0, 1.0, 0.0]
NORMAL0 = [0.0, 0.0, 1.0]

## angles are specified in degrees at the public boundary
degree = pi / 180.0

def checknum(x,name='argument'):
    """raise ``InvalidArgumentError`` unless ``x`` is a finite number"""
    if not vec.isfinitenum(x):
        raise InvalidArgumentError('bad {}: {}'.format(name,x))
    return x


class TurtleFrame:
    """position and orthonormal (heading, normal) pair of a turtle

    All motion primitives mutate the frame in place.  Construction
    validates the frame: both directions must be unit length and
    mutually orthogonal to within ``turtle3d.vec.epsilon``.
    """

    def __init__(self,position=(0.0,0.0,0.0),heading=HEADING0,normal=NORMAL0):
        for name, v in (('position',position),('heading',heading),('normal',normal)):
            if not vec.isvect3(v):
                raise InvalidFrameError('bad {} vector: {}'.format(name,v))
        self.position = vec.vect(position)
        self.heading = vec.vect(heading)
        self.normal = vec.vect(normal)
        self.check()

    def __repr__(self):
        return "TurtleFrame({},{},{})".format(self.position,self.heading,self.normal)

    def __eq__(self,other):
        if not isinstance(other,TurtleFrame):
            return NotImplemented
        return self.position == other.position and \
            self.heading == other.heading and \
            self.normal == other.normal

    def copy(self):
        return TurtleFrame(self.position,self.heading,self.normal)

    ## validate the orthonormality invariant
    def check(self,eps=vec.epsilon):
        if not vec.close(vec.mag(self.heading),1.0,eps):
            raise InvalidFrameError('heading is not a unit vector: {}'.format(self.heading))
        if not vec.close(vec.mag(self.normal),1.0,eps):
            raise InvalidFrameError('normal is not a unit vector: {}'.format(self.normal))
        if not vec.close(vec.dot(self.heading,self.normal),0.0,eps):
            raise InvalidFrameError('heading {} and normal {} are not orthogonal'.format(
                self.heading,self.normal))
        return True

    ## derived axes

    @property
    def left(self):
        return vec.checkaxis(vec.cross(self.normal,self.heading),'left axis')

    @property
    def right(self):
        return vec.checkaxis(vec.cross(self.heading,self.normal),'right axis')

    def reset(self,position):
        """put the frame at ``position`` with the canonical heading and normal"""
        if not vec.isvect3(position):
            raise InvalidFrameError('bad position vector: {}'.format(position))
        self.position = vec.vect(position)
        self.heading = list(HEADING0)
        self.normal = list(NORMAL0)

    ## motion primitives
    ## -----------------

    def move(self,d,unit=1.0):
        """advance ``d`` units along the heading, return the old and new
        positions"""
        checknum(d,'distance')
        old = self.position
        new = vec.linear(1.0,old,d*unit,self.heading)
        if not vec.isvect3(new):
            raise InvalidArgumentError('distance {} overflows the position'.format(d))
        self.position = new
        return old, new

    def turn(self,phi):
        """yaw: rotate the heading toward left about the normal by ``phi``
        degrees"""
        alpha = checknum(phi,'turn angle') * degree
        self.heading = vec.unit(
            vec.rotate_normal(self.heading,self.left,self.normal,alpha))

    def roll(self,psi):
        """roll: rotate the normal toward right about the heading by
        ``psi`` degrees"""
        alpha = checknum(psi,'roll angle') * degree
        self.normal = vec.unit(
            vec.rotate_normal(self.normal,self.right,self.heading,alpha))

    def dive(self,theta):
        """pitch: rotate the normal toward the heading about left by
        ``theta`` degrees, then rebuild the heading from left and the
        new normal.

        left is taken once, before the normal moves.  Rotating the
        normal toward the heading breaks their orthogonality, unlike
        turn and roll where the fixed axis is already orthogonal to the
        moving vector, so the heading is recomputed from the cross
        product instead of rotated.  Both results are renormalized;
        otherwise rounding error in left compounds with every dive.
        """
        alpha = checknum(theta,'dive angle') * degree
        left = self.left
        self.normal = vec.unit(vec.rotate_normal(self.normal,self.heading,left,alpha))
        self.heading = vec.unit(vec.cross(left,self.normal))
