## drawable that records issued draw commands, for turtle3d
## Copyright (c) 2020 Richard W. DeVaul
## Copyright (c) 2020 yapCAD contributors
## All rights reserved
## See licensing terms here: https://github.com/rdevaul/yapCAD/blob/master/LICENSE

from dataclasses import dataclass, field
from typing import List, Optional

import turtle3d.drawable as drawable


@dataclass
class DrawCommand:
    """One stroke, fill or clear issued to a surface, in issue order."""
    op: str                                 # 'stroke', 'fill' or 'clear'
    points: List[List[float]] = field(default_factory=list)
    color: Optional[str] = None
    width: float = 1.0
    cap: str = 'butt'
    join: str = 'miter'
    closed: bool = False


## class to provide a drawing surface that renders nothing and keeps
## the sequence of draw commands instead.  Since the painter's
## algorithm makes draw order the only depth cue, the command sequence
## is exactly what determines the final picture.
class RecordingDraw(drawable.Drawable):

    def __init__(self,width=400,height=300):
        super().__init__(width,height)
        self.__commands = []

    def __repr__(self):
        return 'an instance of RecordingDraw'

    @property
    def commands(self):
        return list(self.__commands)

    def ops(self):
        """return (op, color) pairs for all recorded commands"""
        return [ (c.op, c.color) for c in self.__commands ]

    def reset(self):
        self.__commands = []

    ## Overload virtual turtle3d.drawable base class rendering methods

    def render_stroke(self,path,closed,style):
        self.__commands.append(DrawCommand('stroke',path,
                                           color=style['strokecolor'],
                                           width=style['linewidth'],
                                           cap=style['linecap'],
                                           join=style['linejoin'],
                                           closed=closed))

    def render_fill(self,path,style):
        self.__commands.append(DrawCommand('fill',path,
                                           color=style['fillcolor'],
                                           width=style['linewidth'],
                                           cap=style['linecap'],
                                           join=style['linejoin'],
                                           closed=True))

    def render_clear(self,color):
        self.__commands.append(DrawCommand('clear',color=color))

    def display(self):
        return True
