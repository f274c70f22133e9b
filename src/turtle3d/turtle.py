## pseudo 3D turtle for turtle3d drawables
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

"""pseudo 3D turtle graphics on a **turtle3d** drawable

Each turtle moves in 3D space, but its trail is projected onto the
surface plane and overlap is ordered by time rather than by depth.
A minimal session: ::

    from turtle3d.turtle import Turtle
    from turtle3d.ezdxf_drawable import ezdxfDraw

    d = ezdxfDraw()
    t = Turtle(d)
    t.draw_turtle('blue')
    t.move(1); t.turn(90); t.move(1)
    t.draw_turtle('red')
    d.display()

Distances are in turtle units (``config.unit`` surface units each),
angles in degrees.  Positive turns go left, positive rolls go right
(starboard down), positive dives tip the nose down, away from the
normal.
"""

import logging
from dataclasses import dataclass

import turtle3d.render as render
from turtle3d.config import TurtleConfig
from turtle3d.errors import InvalidArgumentError, InvalidFrameError
from turtle3d.events import CommandRecord
from turtle3d.frame import TurtleFrame, checknum

logger = logging.getLogger(__name__)


@dataclass
class PenState:
    """whether and how moves leave a trail"""
    active: bool = True
    style: str = 'black'
    width: float = 2


class Turtle:
    """a turtle drawing on drawable ``surface``

    ``config`` supplies the unit length and home point; when omitted a
    ``TurtleConfig`` sized to the surface is used.  ``frame`` is an
    optional initial frame; its position need not be home.  ``log`` is
    an optional command sink with an ``append(record)`` method (see
    ``turtle3d.events.CommandLog``).
    """

    def __init__(self,surface,config=None,frame=None,log=None):
        if config is None:
            config = TurtleConfig(width=surface.width,height=surface.height)
        if frame is not None and not isinstance(frame,TurtleFrame):
            raise InvalidFrameError('bad initial frame: {}'.format(frame))
        self.__surface = surface
        self.__config = config
        self.__unit = config.unit
        self.__home = config.home()
        self.__pen = PenState()
        self.__log = log
        if frame is None:
            self.__frame = TurtleFrame(self.__home)
        else:
            self.__frame = frame.copy()

    def __repr__(self):
        return 'Turtle(position={}, heading={}, normal={})'.format(
            self.__frame.position,self.__frame.heading,self.__frame.normal)

    def _record(self,name,*args):
        logger.debug('%s%s',name,args)
        if self.__log is not None:
            self.__log.append(CommandRecord(name,tuple(args)))

    ## properties

    @property
    def surface(self):
        return self.__surface

    @property
    def config(self):
        return self.__config

    @property
    def unit(self):
        return self.__unit

    @property
    def home_point(self):
        return list(self.__home)

    @property
    def log(self):
        return self.__log

    @property
    def frame(self):
        """a copy of the current frame"""
        return self.__frame.copy()

    @property
    def position(self):
        return list(self.__frame.position)

    @property
    def heading(self):
        return list(self.__frame.heading)

    @property
    def normal(self):
        return list(self.__frame.normal)

    @property
    def left(self):
        return self.__frame.left

    @property
    def pen(self):
        return PenState(self.__pen.active,self.__pen.style,self.__pen.width)

    ## state commands

    def home(self):
        """put the turtle at its home point, heading right, normal up"""
        self._record('Home')
        self.__frame.reset(self.__home)

    def clean(self,color=None):
        """clear the surface, optionally filling it with ``color``"""
        if color is None:
            self._record('Clean')
        else:
            if not self.__surface.checkcolor(color):
                raise InvalidArgumentError('bad clean color: {}'.format(color))
            self._record('Clean',color)
        self.__surface.clear(color)

    def pen_active(self,b):
        if not isinstance(b,bool):
            raise InvalidArgumentError('pen state must be a bool: {}'.format(b))
        self._record('PenActive',b)
        self.__pen.active = b

    def pen_down(self):
        self._record('PenDown')
        self.__pen.active = True

    def pen_up(self):
        self._record('PenUp')
        self.__pen.active = False

    def set_pen_width(self,w):
        checknum(w,'pen width')
        if not w > 0:
            raise InvalidArgumentError('pen width must be positive: {}'.format(w))
        self._record('SetPenWidth',w)
        self.__pen.width = w

    def set_pen_style(self,c):
        if not self.__surface.checkcolor(c):
            raise InvalidArgumentError('bad pen style: {}'.format(c))
        self._record('SetPenStyle',c)
        self.__pen.style = c

    ## motion commands
    ## each command is applied before it is recorded, so a command
    ## that raises never reaches the log

    def _move(self,d):
        old, new = self.__frame.move(d,self.__unit)
        if self.__pen.active and d != 0:
            render.draw_segment(self.__surface,old,new,
                                self.__pen.style,self.__pen.width)

    def move(self,d):
        """move ``d`` units along the heading, drawing if the pen is down"""
        checknum(d,'distance')
        self._move(d)
        self._record('Move',d)

    def turn(self,phi):
        """yaw ``phi`` degrees about the normal; positive is to the left"""
        checknum(phi,'turn angle')
        self.__frame.turn(phi)
        self._record('Turn',phi)

    def roll(self,psi):
        """roll ``psi`` degrees about the heading"""
        checknum(psi,'roll angle')
        self.__frame.roll(psi)
        self._record('Roll',psi)

    def dive(self,theta):
        """pitch ``theta`` degrees about the left axis"""
        checknum(theta,'dive angle')
        self.__frame.dive(theta)
        self._record('Dive',theta)

    def segment(self,d,psi,phi):
        """move ``d``, then roll ``psi``, then turn ``phi``

        Recorded as one Segment command, in the command log and in the
        debug log alike.
        """
        checknum(d,'distance')
        checknum(psi,'roll angle')
        checknum(phi,'turn angle')
        self._move(d)
        self.__frame.roll(psi)
        self.__frame.turn(phi)
        self._record('Segment',d,psi,phi)

    def draw_turtle(self,c):
        """draw the turtle glyph, starboard wing filled with color ``c``"""
        if not self.__surface.checkcolor(c):
            raise InvalidArgumentError('bad turtle color: {}'.format(c))
        self._record('DrawTurtle',c)
        render.draw_turtle(self.__surface,self.__frame,self.__unit,c)

    ## abbreviated command names
    def pa(self,b):
        return self.pen_active(b)

    def pd(self):
        return self.pen_down()

    def pu(self):
        return self.pen_up()

    def m(self,d):
        return self.move(d)

    def t(self,phi):
        return self.turn(phi)

    def r(self,psi):
        return self.roll(psi)

    def d(self,theta):
        return self.dive(theta)

    def s(self,d,psi,phi):
        return self.segment(d,psi,phi)

    def dt(self,c):
        return self.draw_turtle(c)
