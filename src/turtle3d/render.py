## turtle trail and glyph rendering for turtle3d
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

"""rendering of turtle trails and the turtle glyph

The drawing is pseudo 3D: turtles move in 3D space but are projected
on the surface plane, and overlap is resolved by time, not by depth.
Whatever is drawn last at a surface point wins, whatever its third
coordinate.

The turtle glyph is a triangle split along its spine into two wings,
with a triangular fin standing on the spine along the normal.  The
starboard wing is filled with the turtle's color and the port wing
with white.  The only depth cue is the order in which the parts are
issued, chosen from the sign of the frame's third components:

- ``normal[Z] >= 0``: the fin points toward the viewer, so the wings
  are drawn first and the fin on top.  The wings carry "eyes".
- ``normal[Z] < 0``: the fin points away, so it is drawn first and
  the wings cover it.  The wings carry a cross-hair instead.
- ``left[Z] >= 0``: the white side of the fin faces the viewer,
  otherwise the colored side does.

Every routine brackets its style changes with ``save()`` and
``restore()`` so nothing leaks onto later draws.
"""

from dataclasses import dataclass
from math import cos, radians, sin
from typing import List

import turtle3d.vec as vec
from turtle3d.projector import project
from turtle3d.vec import Z

## half nose angle of the glyph, degrees
NOSE_HALF_ANGLE = 30.0

## fixed contrast color of the glyph
CONTRAST = 'white'


@dataclass
class Pose:
    """turtle-space points of the glyph for one frame"""
    nose: List[float]
    back: List[float]
    port: List[float]
    star: List[float]
    fin: List[float]
    offset: float                   # distance from position to nose


def glyph_pose(frame,unit):
    """compute the glyph points of ``frame`` at scale ``unit``

    The glyph's hypotenuse is ``unit`` long; the nose sits 2/3 of the
    spine length ahead of the turtle's position.
    """
    left = frame.left
    alpha = radians(NOSE_HALF_ANGLE)
    ca = cos(alpha)
    sa = sin(alpha)
    h = unit
    a = 2.0/3.0 * h * ca

    nose = vec.linear(1,frame.position,a,frame.heading)
    back = vec.linear(1,nose,-h*ca,frame.heading)
    port = vec.linear(1,back,h*sa,left)
    star = vec.linear(1,back,-h*sa,left)
    fin = vec.linear(1,back,h*sa,frame.normal)
    return Pose(nose,back,port,star,fin,a)

## build one path from turtle-space points
def _path(d,points,closed=False):
    d.begin_path()
    d.move_to(project(points[0]))
    for p in points[1:]:
        d.line_to(project(p))
    if closed:
        d.close_path()

def draw_segment(d,p0,p1,color,width):
    """stroke a trail segment from turtle-space ``p0`` to ``p1``"""
    d.save()
    try:
        d.linecap = 'round'
        d.linejoin = 'round'
        d.linewidth = width
        d.strokecolor = color
        _path(d,[p0,p1])
        d.stroke()
    finally:
        d.restore()

def _draw_wings(d,frame,pose,color):
    position = frame.position
    heading = frame.heading
    a = pose.offset

    # starboard wing
    _path(d,[pose.nose,pose.back,pose.star],closed=True)
    d.fillcolor = color
    d.fill()

    # port wing
    _path(d,[pose.nose,pose.back,pose.port],closed=True)
    d.fillcolor = CONTRAST
    d.fill()

    if frame.normal[Z] >= 0:
        # eyes on top: zero-length round-capped strokes
        mid = vec.linear(1,position,a/2,heading)
        stareye = vec.linear(1,mid,1.0/7.0,vec.sub(pose.star,pose.back))
        porteye = vec.linear(1,mid,1.0/7.0,vec.sub(pose.port,pose.back))
        d.save()
        try:
            d.linewidth = 2
            _path(d,[stareye,stareye])
            d.strokecolor = CONTRAST
            d.stroke()
            _path(d,[porteye,porteye])
            d.strokecolor = color
            d.stroke()
        finally:
            d.restore()
    else:
        # fin is down, cross-hair on the belly
        _path(d,[position,vec.linear(1,position,0.2,vec.sub(pose.port,pose.nose))])
        d.strokecolor = color
        d.stroke()
        _path(d,[position,vec.linear(1,position,0.2,vec.sub(pose.star,pose.nose))])
        d.strokecolor = CONTRAST
        d.stroke()

    # starboard wing's edge
    _path(d,[pose.nose,pose.star,pose.back])
    d.strokecolor = CONTRAST
    d.stroke()

    # port wing's edge
    _path(d,[pose.nose,pose.port,pose.back])
    d.strokecolor = color
    d.stroke()

def _draw_fin_face(d,frame,pose,color):
    _path(d,[frame.position,pose.fin,pose.back],closed=True)
    d.fillcolor = color
    d.fill()

def _draw_fin_edge(d,frame,pose,color):
    _path(d,[frame.position,pose.fin,pose.back],closed=True)
    d.strokecolor = color
    d.stroke()

def _draw_fin(d,frame,pose,color):
    if frame.left[Z] >= 0:
        _draw_fin_face(d,frame,pose,CONTRAST)
        _draw_fin_edge(d,frame,pose,color)
    else:
        _draw_fin_edge(d,frame,pose,CONTRAST)
        _draw_fin_face(d,frame,pose,color)

def draw_turtle(d,frame,unit,color):
    """draw the turtle glyph for ``frame`` on drawable ``d``"""
    pose = glyph_pose(frame,unit)
    d.save()
    try:
        d.linewidth = 1
        d.linecap = 'round'
        d.linejoin = 'round'
        if frame.normal[Z] >= 0:
            # fin is up, draw it last
            _draw_wings(d,frame,pose,color)
            _draw_fin(d,frame,pose,color)
        else:
            # fin is down, draw it first
            _draw_fin(d,frame,pose,color)
            _draw_wings(d,frame,pose,color)
    finally:
        d.restore()
    return pose
