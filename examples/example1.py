## multi-rendering-back-end turtle example for turtle3d
print("example1.py -- turtle3d DXF and OpenGL drawing example")

import sys

from turtle3d.config import TurtleConfig
from turtle3d.ezdxf_drawable import ezdxfDraw
from turtle3d.pyglet_drawable import pygletDraw
from turtle3d.turtle import Turtle

#set up openGL rendering
def setupGL(config):
    return pygletDraw(config.width,config.height)

#set up DXF rendering
def setupDXF(config):
    d=ezdxfDraw(config.width,config.height)
    filename="example1-out"
    print("\nOutput file name is {}.dxf".format(filename))
    d.filename = filename
    return d

## Walk a star with five points, drawing the turtle at each point.
## Every other arm is rolled over, so half the glyphs show the
## belly cross-hair instead of the eyes.
def star(t):
    t.set_pen_width(2)
    for i in range(5):
        t.draw_turtle('red' if i % 2 else 'blue')
        t.set_pen_style('gray')
        t.move(4)
        t.turn(-144)
        t.roll(180)
    t.home()
    t.draw_turtle('green')

if __name__ == "__main__":
    config = TurtleConfig(unit=20,width=400,height=300,origin='mc')
    d = setupDXF(config)
    t = Turtle(d,config=config)
    t.pen_up()
    t.move(-2)
    t.pen_down()
    star(t)
    d.display()

    if len(sys.argv) > 1 and sys.argv[1] == 'gl':
        dGl = setupGL(config)
        star(Turtle(dGl,config=config))
        dGl.display()
