## three-vector operations for the turtle3d frame model
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

"""three-vector operations for **turtle3d**

Vectors in **turtle3d** are plain Python3 lists of three numbers,
``[a, b, c]``.  Unlike the homogeneous coordinates used for CAD
geometry there is no ``w`` component: a turtle frame is made of
directions and a position, and none of them is ever projected.

Nothing in the representation enforces unit length.  The functions
that need unit vectors (``rotate_normal`` in particular) say so, and
it is up to the caller (usually ``turtle3d.frame``) to supply them.

The three operations that the frame model is built on are:

- ``linear(a,u,b,v)`` -- the affine combination `a*u + b*v`
- ``cross(u,v)`` -- the 3D cross product
- ``rotate_normal(u,v,w,alpha)`` -- rotate unit vector ``u`` toward
  unit vector ``v`` about axis ``w`` by ``alpha`` radians

"""

from math import *

from turtle3d.errors import IndeterminateOrientationError

## constants
## tolerance for orthonormality checks on turtle frames
epsilon = 1e-9

## vector component indices
X = 0
Y = 1
Z = 2

## operations on scalars
## -----------------------

def isgoodnum(n):
    """ determine if an argument is actually a scalar number, and not boolean
    """
    return (not isinstance(n,bool)) and isinstance(n,(int,float))

def isfinitenum(n):
    """ is ``n`` a scalar number that is neither NaN nor infinite"""
    return isgoodnum(n) and isfinite(n)

def close(a,b,eps=epsilon):
    """ are two scalars the same within ``eps``
    """
    return abs(a-b) < eps

## operations on vectors
## ------------------------

def vect(a=0.0,b=0.0,c=0.0):
    """Convenience function for making a three vector"""
    if isinstance(a,(tuple,list)):
        return list(a[0:3])
    return [a,b,c]

def isvect3(x):
    """
    check to see if argument is a proper three vector of finite numbers
    """
    return isinstance(x,(list,tuple)) and len(x) == 3 and \
        isfinitenum(x[0]) and isfinitenum(x[1]) and isfinitenum(x[2])

def add(u,v):
    """ `u + v`"""
    return [u[0]+v[0],u[1]+v[1],u[2]+v[2]]

def sub(u,v):
    """ `u - v`"""
    return [u[0]-v[0],u[1]-v[1],u[2]-v[2]]

def scale3(u,c):
    """ vector ``u`` times scalar ``c``"""
    return [u[0]*c,u[1]*c,u[2]*c]

def dot(u,v):
    """ ``u`` dot ``v`` """
    return u[0]*v[0]+u[1]*v[1]+u[2]*v[2]

def mag(u):
    """ compute the magnitude of ``u``"""
    return sqrt(u[0]*u[0]+u[1]*u[1]+u[2]*u[2])

def dist(u,v):
    """ euclidean distance between points ``u`` and ``v``"""
    return mag(sub(u,v))

## determine if two vectors are the same, to within eps
def vclose(u,v,eps=epsilon):
    return close(mag(sub(u,v)),0,eps)

def unit(u):
    """return ``u`` scaled to unit length.  Raise
    ``IndeterminateOrientationError`` if ``u`` has (near) zero length,
    since no direction can be recovered from it.
    """
    m = mag(u)
    if not m > epsilon:
        raise IndeterminateOrientationError('cannot normalize vector {}'.format(vstr(u)))
    return scale3(u,1.0/m)

def linear(a,u,b,v):
    """Return the linear combination `a*u + b*v`"""
    return [ a*u[c] + b*v[c] for c in range(X,Z+1) ]

def cross(u,v):
    """Return the cross product `u x v`.  Component ``c`` of the result
    is `u[c+1]*v[c+2] - u[c+2]*v[c+1]`, indices taken modulo 3.
    """
    return [ u[(c+1)%3]*v[(c+2)%3] - u[(c+2)%3]*v[(c+1)%3]
             for c in range(X,Z+1) ]

def rotate_normal(u,v,w,alpha):
    """Return ``u`` rotated in the direction of ``v`` about ``w`` by
    ``alpha`` radians.

    ``u``, ``v`` and ``w`` must be orthonormal.  The result is then a
    unit vector orthogonal to ``w``: `cos(alpha)*u + sin(alpha)*v`.
    ``w`` does not enter the computation, it names the axis.
    """
    return linear(cos(alpha),u,sin(alpha),v)

## axis length check for derived frame vectors
def checkaxis(u,name='axis'):
    if not mag(u) > epsilon:
        raise IndeterminateOrientationError('degenerate {}: {}'.format(name,vstr(u)))
    return u

## string formatting for vectors, drop trailing zero z
def vstr(u):
    if not isinstance(u,(list,tuple)):
        return str(u)
    if len(u) == 3 and u[2] == 0:
        return str(list(u[0:2]))
    return str(list(u))
