## simple turtle3d framework for dxf-rendered drawable objects using
## ezdxf package.
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

import ezdxf
from ezdxf import colors

import turtle3d.drawable as drawable
from turtle3d.vec import close

logger = logging.getLogger(__name__)

## class to provide dxf drawing functionality.  Strokes become
## LWPOLYLINE entities, fills become solid HATCH entities, both in
## issue order, so a DXF viewer that paints entities in database order
## reproduces the painter's algorithm.  Surface y runs down, DXF y runs
## up, so y is flipped about the surface height.
class ezdxfDraw(drawable.Drawable):

    def __init__(self,width=400,height=300):
        super().__init__(width,height)

        # setup=False avoids creating default blocks (like _CLOSEDFILLED) that
        # contain SOLID entities unsupported by some CAD programs (e.g., FreeCAD)
        self.__doc = ezdxf.new(dxfversion='R2010', setup=False)
        self.__doc.header['$INSUNITS'] = 0 # unitless, surface units
        self.__doc.layers.new('PATHS',  dxfattribs={'color': 7}) #white
        self.__doc.layers.new('GLYPHS',  dxfattribs={'color': 2}) #yellow
        self.__msp = self.__doc.modelspace()
        self.__filename = "turtle3d-out"
        self.__layerlist = [False, '0', 'PATHS', 'GLYPHS']
        self.__layer = False

    def __repr__(self):
        return 'an instance of ezdxfDraw'

    ## properties

    @property
    def doc(self):
        return self.__doc

    @property
    def layerlist(self):
        return list(self.__layerlist)

    @property
    def layer(self):
        return self.__layer

    @layer.setter
    def layer(self,lyr=False):
        if lyr in self.__layerlist:
            self.__layer = lyr
        else:
            raise ValueError('bad layer: ' + str(lyr))

    @property
    def filename(self):
        return self.__filename

    def _set_filename(self,name):
        self.__filename = name

    @filename.setter
    def filename(self,name):
        if not isinstance(name,str):
            raise ValueError('bad (non-string) filename: '+str(name))
        self._set_filename(name)

    ## utility functions

    def _layer(self):
        layer = self.layer
        if layer == False:
            layer = '0'
        return layer

    def _xy(self,p):
        return (p[0], self.height - p[1])

    def _true_color(self,c):
        return colors.rgb2int(tuple(self.thing2color(c,'b')))

    def _dot(self,p,style):
        # a zero-length round-capped stroke paints a disc
        hatch = self.__msp.add_hatch(dxfattribs={'layer': self._layer()})
        hatch.set_solid_fill(rgb=tuple(self.thing2color(style['strokecolor'],'b')))
        edge = hatch.paths.add_edge_path()
        edge.add_arc(self._xy(p), style['linewidth']/2.0, 0.0, 360.0)

    ## Overload virtual turtle3d.drawable base class rendering methods

    def render_stroke(self,path,closed,style):
        if all(close(p[0],path[0][0]) and close(p[1],path[0][1]) for p in path):
            if style['linecap'] == 'round':
                self._dot(path[0],style)
            return
        self.__msp.add_lwpolyline([self._xy(p) for p in path],
                                  close=closed,
                                  dxfattribs={'layer': self._layer(),
                                              'true_color': self._true_color(style['strokecolor']),
                                              'const_width': style['linewidth']})

    def render_fill(self,path,style):
        hatch = self.__msp.add_hatch(dxfattribs={'layer': self._layer()})
        hatch.set_solid_fill(rgb=tuple(self.thing2color(style['fillcolor'],'b')))
        hatch.paths.add_polyline_path([self._xy(p) for p in path], is_closed=True)

    def render_clear(self,color):
        for e in list(self.__msp):
            self.__msp.delete_entity(e)
        if color is not None:
            hatch = self.__msp.add_hatch(dxfattribs={'layer': self._layer()})
            hatch.set_solid_fill(rgb=tuple(self.thing2color(color,'b')))
            hatch.paths.add_polyline_path([(0,0),(self.width,0),
                                           (self.width,self.height),(0,self.height)],
                                          is_closed=True)

    def display(self):
        name = "{}.dxf".format(self.filename)
        self.__doc.saveas(name)
        logger.info("wrote %s", name)
        return True
