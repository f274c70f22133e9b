## base class of drawing surfaces for turtle3d
## Copyright (c) 2020 Richard W. DeVaul
## Copyright (c) 2020 yapCAD contributors
## All rights reserved
## See licensing terms here: https://github.com/rdevaul/yapCAD/blob/master/LICENSE

import logging

from turtle3d.vec import isgoodnum

logger = logging.getLogger(__name__)

## A drawing surface in the style of an HTML5 2D canvas context: paths
## are built with move_to/line_to, then stroked or filled with the
## current style.  Style (stroke and fill color, line width, cap and
## join) is global to the surface, so callers bracket their style
## changes with save() and restore().

## Surface coordinates: x+ to the right, y+ down.

LINECAPS = ('butt', 'round', 'square')
LINEJOINS = ('miter', 'round', 'bevel')

class Drawable:
    """Base class for turtle3d drawing surfaces"""

    ## pure virtual functions -- override for specific rendering
    ## system.  ``path`` is a list of [x,y] surface points, ``style``
    ## is a snapshot dictionary of the style in effect.
    def render_stroke(self,path,closed,style):
        logger.warning("pure virtual render_stroke called: %s, %s, %s",path,closed,style)
        return

    def render_fill(self,path,style):
        logger.warning("pure virtual render_fill called: %s, %s",path,style)
        return

    def render_clear(self,color):
        logger.warning("pure virtual render_clear called: %s",color)
        return

    def __init__(self,width=400,height=300):
        self.__strokecolor = 'black'
        self.__fillcolor = 'black'
        self.__linewidth = 1.0
        self.__linecap = 'butt'
        self.__linejoin = 'miter'
        self.__stack = []
        self.__subpaths = []
        self.__width = 400
        self.__height = 300
        self.width = width
        self.height = height

    ## surface size properties

    @property
    def width(self):
        return self.__width

    @width.setter
    def width(self,w):
        if not isgoodnum(w) or w <= 0:
            raise ValueError('bad surface width ' + str(w))
        self.__width = w

    @property
    def height(self):
        return self.__height

    @height.setter
    def height(self,h):
        if not isgoodnum(h) or h <= 0:
            raise ValueError('bad surface height ' + str(h))
        self.__height = h

    ## style properties

    @property
    def linewidth(self):
        return self.__linewidth

    def _set_linewidth(self,lw):
        self.__linewidth=lw

    @linewidth.setter
    def linewidth(self,lw):
        if not isgoodnum(lw) or not lw > 0:
            raise ValueError('invalid linewidth ' + str(lw))
        self._set_linewidth(lw)

    @property
    def linecap(self):
        return self.__linecap

    @linecap.setter
    def linecap(self,cap):
        if cap in LINECAPS:
            self.__linecap = cap
        else:
            raise ValueError('bad linecap: ' + str(cap))

    @property
    def linejoin(self):
        return self.__linejoin

    @linejoin.setter
    def linejoin(self,join):
        if join in LINEJOINS:
            self.__linejoin = join
        else:
            raise ValueError('bad linejoin: ' + str(join))

    ## color is a complex property -- it can be set as a standard
    ## color name, an RGB tripple, or a '#rrggbb' hex string

    def checkcolor(self,c):
        try:
            self.thing2color(c,'b')
        except ValueError:
            return False
        return True

    @property
    def strokecolor(self):
        return self.__strokecolor

    def _set_strokecolor(self,c):
        self.__strokecolor=c

    @strokecolor.setter
    def strokecolor(self,c):
        if self.checkcolor(c):
            self._set_strokecolor(c)
        else:
            raise ValueError('bad strokecolor ' + str(c))

    @property
    def fillcolor(self):
        return self.__fillcolor

    def _set_fillcolor(self,c):
        self.__fillcolor = c

    @fillcolor.setter
    def fillcolor(self,c):
        if self.checkcolor(c):
            self._set_fillcolor(c)
        else:
            raise ValueError('bad fillcolor ' + str(c))

    ## scoped style state
    ## ------------------

    def style(self):
        """return a snapshot of the current style state"""
        return {'strokecolor': self.__strokecolor,
                'fillcolor': self.__fillcolor,
                'linewidth': self.__linewidth,
                'linecap': self.__linecap,
                'linejoin': self.__linejoin}

    def save(self):
        self.__stack.append(self.style())

    def restore(self):
        if not self.__stack:
            raise ValueError('restore called without matching save')
        st = self.__stack.pop()
        self.__strokecolor = st['strokecolor']
        self.__fillcolor = st['fillcolor']
        self.__linewidth = st['linewidth']
        self.__linecap = st['linecap']
        self.__linejoin = st['linejoin']

    @property
    def depth(self):
        """number of unrestored save() calls"""
        return len(self.__stack)

    ## path construction
    ## -----------------

    def begin_path(self):
        self.__subpaths = []

    def move_to(self,p):
        self.__subpaths.append({'points': [[p[0],p[1]]], 'closed': False})

    def line_to(self,p):
        # a line_to with no current point behaves like move_to
        if not self.__subpaths:
            self.move_to(p)
            return
        self.__subpaths[-1]['points'].append([p[0],p[1]])

    def close_path(self):
        if self.__subpaths:
            sp = self.__subpaths[-1]
            sp['closed'] = True
            # canvas starts a new subpath at the closing point
            self.__subpaths.append({'points': [list(sp['points'][0])], 'closed': False})

    def stroke(self):
        st = self.style()
        for sp in self.__subpaths:
            if len(sp['points']) > 1:
                self.render_stroke([list(p) for p in sp['points']],sp['closed'],st)

    def fill(self):
        st = self.style()
        for sp in self.__subpaths:
            if len(sp['points']) > 2:
                self.render_fill([list(p) for p in sp['points']],st)

    def clear(self,color=None):
        """clear the surface, optionally filling it with ``color``"""
        if color is not None and not self.checkcolor(color):
            raise ValueError('bad clear color ' + str(color))
        self.__subpaths = []
        self.render_clear(color)

    ## non-property methods

    def __repr__(self):
        return 'an abstract Drawable instance'

    ## cause drawing page to be rendered -- pure virtual in base class
    def display(self):
        logger.warning('pure virtual display function called')
        return True

    ## Standard color names per W3C CSS Color Module Level 4 keywords.
    colordict = {
        'aliceblue': [240, 248, 255],
        'antiquewhite': [250, 235, 215],
        'aqua': [0, 255, 255],
        'aquamarine': [127, 255, 212],
        'azure': [240, 255, 255],
        'beige': [245, 245, 220],
        'bisque': [255, 228, 196],
        'black': [0, 0, 0],
        'blanchedalmond': [255, 235, 205],
        'blue': [0, 0, 255],
        'blueviolet': [138, 43, 226],
        'brown': [165, 42, 42],
        'burlywood': [222, 184, 135],
        'cadetblue': [95, 158, 160],
        'chartreuse': [127, 255, 0],
        'chocolate': [210, 105, 30],
        'coral': [255, 127, 80],
        'cornflowerblue': [100, 149, 237],
        'cornsilk': [255, 248, 220],
        'crimson': [220, 20, 60],
        'cyan': [0, 255, 255],
        'darkblue': [0, 0, 139],
        'darkcyan': [0, 139, 139],
        'darkgoldenrod': [184, 134, 11],
        'darkgray': [169, 169, 169],
        'darkgreen': [0, 100, 0],
        'darkgrey': [169, 169, 169],
        'darkkhaki': [189, 183, 107],
        'darkmagenta': [139, 0, 139],
        'darkolivegreen': [85, 107, 47],
        'darkorange': [255, 140, 0],
        'darkorchid': [153, 50, 204],
        'darkred': [139, 0, 0],
        'darksalmon': [233, 150, 122],
        'darkseagreen': [143, 188, 143],
        'darkslateblue': [72, 61, 139],
        'darkslategray': [47, 79, 79],
        'darkslategrey': [47, 79, 79],
        'darkturquoise': [0, 206, 209],
        'darkviolet': [148, 0, 211],
        'deeppink': [255, 20, 147],
        'deepskyblue': [0, 191, 255],
        'dimgray': [105, 105, 105],
        'dimgrey': [105, 105, 105],
        'dodgerblue': [30, 144, 255],
        'firebrick': [178, 34, 34],
        'floralwhite': [255, 250, 240],
        'forestgreen': [34, 139, 34],
        'fuchsia': [255, 0, 255],
        'gainsboro': [220, 220, 220],
        'ghostwhite': [248, 248, 255],
        'gold': [255, 215, 0],
        'goldenrod': [218, 165, 32],
        'gray': [128, 128, 128],
        'green': [0, 127, 0],
        'greenyellow': [173, 255, 47],
        'grey': [128, 128, 128],
        'honeydew': [240, 255, 240],
        'hotpink': [255, 105, 180],
        'indianred': [205, 92, 92],
        'indigo': [75, 0, 130],
        'ivory': [255, 255, 240],
        'khaki': [240, 230, 140],
        'lavender': [230, 230, 250],
        'lavenderblush': [255, 240, 245],
        'lawngreen': [124, 252, 0],
        'lemonchiffon': [255, 250, 205],
        'lightblue': [173, 216, 230],
        'lightcoral': [240, 128, 128],
        'lightcyan': [224, 255, 255],
        'lightgoldenrodyellow': [250, 250, 210],
        'lightgray': [211, 211, 211],
        'lightgreen': [144, 238, 144],
        'lightgrey': [211, 211, 211],
        'lightpink': [255, 182, 193],
        'lightsalmon': [255, 160, 122],
        'lightseagreen': [32, 178, 170],
        'lightskyblue': [135, 206, 250],
        'lightslategray': [119, 136, 153],
        'lightslategrey': [119, 136, 153],
        'lightsteelblue': [176, 196, 222],
        'lightyellow': [255, 255, 224],
        'lime': [0, 255, 0],
        'limegreen': [50, 205, 50],
        'linen': [250, 240, 230],
        'magenta': [255, 0, 255],
        'maroon': [127, 0, 0],
        'mediumaquamarine': [102, 205, 170],
        'mediumblue': [0, 0, 205],
        'mediumorchid': [186, 85, 211],
        'mediumpurple': [147, 112, 219],
        'mediumseagreen': [60, 179, 113],
        'mediumslateblue': [123, 104, 238],
        'mediumspringgreen': [0, 250, 154],
        'mediumturquoise': [72, 209, 204],
        'mediumvioletred': [199, 21, 133],
        'midnightblue': [25, 25, 112],
        'mintcream': [245, 255, 250],
        'mistyrose': [255, 228, 225],
        'moccasin': [255, 228, 181],
        'navajowhite': [255, 222, 173],
        'navy': [0, 0, 128],
        'oldlace': [253, 245, 230],
        'olive': [127, 127, 0],
        'olivedrab': [107, 142, 35],
        'orange': [255, 165, 0],
        'orangered': [255, 69, 0],
        'orchid': [218, 112, 214],
        'palegoldenrod': [238, 232, 170],
        'palegreen': [152, 251, 152],
        'paleturquoise': [175, 238, 238],
        'palevioletred': [219, 112, 147],
        'papayawhip': [255, 239, 213],
        'peachpuff': [255, 218, 185],
        'peru': [205, 133, 63],
        'pink': [255, 192, 203],
        'plum': [221, 160, 221],
        'powderblue': [176, 224, 230],
        'purple': [128, 0, 128],
        'rebeccapurple': [102, 51, 153],
        'red': [255, 0, 0],
        'rosybrown': [188, 143, 143],
        'royalblue': [65, 105, 225],
        'saddlebrown': [139, 69, 19],
        'salmon': [250, 128, 114],
        'sandybrown': [244, 164, 96],
        'seagreen': [46, 139, 87],
        'seashell': [255, 245, 238],
        'sienna': [160, 82, 45],
        'silver': [192, 192, 192],
        'skyblue': [135, 206, 235],
        'slateblue': [106, 90, 205],
        'slategray': [112, 128, 144],
        'slategrey': [112, 128, 144],
        'snow': [255, 250, 250],
        'springgreen': [0, 255, 127],
        'steelblue': [70, 130, 180],
        'tan': [210, 180, 140],
        'teal': [0, 127, 127],
        'thistle': [216, 191, 216],
        'tomato': [255, 99, 71],
        'turquoise': [64, 224, 208],
        'violet': [238, 130, 238],
        'wheat': [245, 222, 179],
        'white': [255, 255, 255],
        'whitesmoke': [245, 245, 245],
        'yellow': [255, 255, 0],
        'yellowgreen': [154, 205, 50],
    }

    ## function to convert between different color representations:
    ## 'b' -- byte tripple, 'f' -- float tripple, 'h' -- '#rrggbb'
    def thing2color(self,thing,convert='b'):
        def _b2f(c):
            return [c[0] / 255.0, c[1] / 255.0, c[2] / 255.0]

        def _b2h(c):
            return '#{:02x}{:02x}{:02x}'.format(c[0],c[1],c[2])

        def _isgoodb(x):
            return isinstance(x,int) and not isinstance(x,bool) and x >= 0 and x < 256

        def _hex2b(s):
            digits = s[1:]
            if len(digits) == 3:
                digits = ''.join(d*2 for d in digits)
            if len(digits) != 6:
                raise ValueError('bad hex color: {}'.format(s))
            try:
                return [int(digits[i:i+2],16) for i in (0,2,4)]
            except ValueError:
                raise ValueError('bad hex color: {}'.format(s))

        if convert not in ['f','b','h']:
            raise ValueError('bad color conversion')
        if isinstance(thing,(list,tuple)) and len(thing) == 3 and \
           _isgoodb(thing[0]) and _isgoodb(thing[1]) and _isgoodb(thing[2]):
            c = list(thing)
        elif isinstance(thing,str) and thing.startswith('#'):
            c = _hex2b(thing)
        elif isinstance(thing,str):
            key = thing.lower()
            if key not in self.colordict:
                raise ValueError('bad color name passed to thing2color: {}'.format(thing))
            c = list(self.colordict[key])
        else:
            raise ValueError('bad thing passed to thing2color: {}'.format(thing))
        if convert == 'f':
            return _b2f(c)
        elif convert == 'h':
            return _b2h(c)
        return c
