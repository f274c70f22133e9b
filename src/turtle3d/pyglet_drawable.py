## simple turtle3d framework for openGL drawing using pyglet
## package
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

import logging

import pyglet
import pyglet.gl as gl
import pyglet.graphics as graphics
import pyglet.shapes as shapes

import turtle3d.drawable as drawable
from turtle3d.vec import close

logger = logging.getLogger(__name__)

## HTML document, instructions for user interaction
turtle3d_legend="""
<font face="Verdana, Geneva, sans-serif" size="2" color="gray"><b>turtle3d</b>
&nbsp;&nbsp;<b>m</b>: toggle this message &nbsp;&nbsp;<b>ESC</b>: exit viewer</font>
"""

## class to provide openGL drawing functionality.  Draw calls are
## kept as primitives in issue order; display() opens a window and
## turns each primitive into pyglet shapes, every one in its own
## ordered group so later draws paint over earlier ones.
class pygletDraw(drawable.Drawable):
    """
    turtle3d ``drawable`` subclass for OpenGL rendering with pyglet
    """

    def __init__(self,width=400,height=300):
        super().__init__(width,height)
        self.__primitives = []
        self.__background = [255,255,255]
        self.__legend = True
        self.__window = None
        self.__shapes = []

    def __repr__(self):
        return 'an instance of pygletDraw'

    @property
    def primitives(self):
        return list(self.__primitives)

    @property
    def background(self):
        return list(self.__background)

    @background.setter
    def background(self,c):
        self.__background = self.thing2color(c,'b')

    ## Overload virtual turtle3d.drawable base class rendering methods

    def render_stroke(self,path,closed,style):
        self.__primitives.append(('stroke',path,closed,dict(style)))

    def render_fill(self,path,style):
        self.__primitives.append(('fill',path,True,dict(style)))

    def render_clear(self,color):
        self.__primitives = []
        if color is not None:
            self.background = color

    ## openGL-specific methods

    def _xy(self,p):
        return (p[0], self.height - p[1])

    def _color(self,c):
        return tuple(self.thing2color(c,'b') + [255])

    def makeShapes(self,batch):
        made = []
        for order, (op, path, closed, style) in enumerate(self.__primitives):
            group = graphics.Group(order=order)
            pts = [ self._xy(p) for p in path ]
            if op == 'fill':
                color = self._color(style['fillcolor'])
                if len(pts) == 3:
                    made.append(shapes.Triangle(*pts[0],*pts[1],*pts[2],
                                                color=color,batch=batch,group=group))
                else:
                    coords = [ list(p) for p in pts ]
                    made.append(shapes.Polygon(*coords,color=color,batch=batch,group=group))
                continue

            color = self._color(style['strokecolor'])
            width = style['linewidth']
            rounded = style['linecap'] == 'round' or style['linejoin'] == 'round'
            if closed:
                pts = pts + [pts[0]]
            if all(close(p[0],pts[0][0]) and close(p[1],pts[0][1]) for p in pts):
                if style['linecap'] == 'round':
                    made.append(shapes.Circle(pts[0][0],pts[0][1],width/2.0,
                                              color=color,batch=batch,group=group))
                continue
            for i in range(1,len(pts)):
                made.append(shapes.Line(pts[i-1][0],pts[i-1][1],
                                        pts[i][0],pts[i][1],
                                        width,color,batch=batch,group=group))
                if rounded and width > 1:
                    made.append(shapes.Circle(pts[i][0],pts[i][1],width/2.0,
                                              color=color,batch=batch,group=group))
        return made

    def window(self):
        return pyglet.window.Window(width=int(self.width),height=int(self.height),
                                    caption='turtle3d',resizable=False)

    ## override base-class virtual display method
    def display(self):
        self.__window = self.window()
        batch = graphics.Batch()
        self.__shapes = self.makeShapes(batch)
        logger.info("displaying %d primitives", len(self.__primitives))
        bg = [ c/255.0 for c in self.__background ]
        label = pyglet.text.HTMLLabel(turtle3d_legend,x=5,y=5,
                                      anchor_x='left',anchor_y='bottom',
                                      width=int(self.width),multiline=True)

        @self.__window.event
        def on_key_press(symbol,modifiers):
            if symbol == pyglet.window.key.M:
                self.__legend = not self.__legend
                return pyglet.event.EVENT_HANDLED

        @self.__window.event
        def on_draw():
            gl.glClearColor(bg[0],bg[1],bg[2],1.0)
            self.__window.clear()
            batch.draw()
            if self.__legend:
                label.draw()
            return pyglet.event.EVENT_HANDLED

        pyglet.app.run()
        return True
