import ezdxf
import pytest
from ezdxf import colors
from turtle3d.ezdxf_drawable import *
from turtle3d.turtle import Turtle
## unit tests for turtle3d ezdxf_drawable.py

def entities(d,kind):
    return list(d.doc.modelspace().query(kind))

class TestEntities:
    def test_trail_and_glyph(self):
        d = ezdxfDraw()
        t = Turtle(d)
        t.move(1)
        t.draw_turtle('red')
        ## three fills and two eyes
        assert len(entities(d,'HATCH')) == 5
        ## trail, two wing edges and the fin edge
        assert len(entities(d,'LWPOLYLINE')) == 4

    def test_y_flip(self):
        d = ezdxfDraw()
        t = Turtle(d)
        t.turn(90)
        t.move(1)
        line = entities(d,'LWPOLYLINE')[0]
        pts = [ (round(x,6), round(y,6)) for x, y in line.get_points('xy') ]
        assert pts == [(200.0,150.0),(200.0,180.0)]

    def test_stroke_attributes(self):
        d = ezdxfDraw()
        t = Turtle(d)
        t.set_pen_style('red')
        t.set_pen_width(3)
        t.move(1)
        line = entities(d,'LWPOLYLINE')[0]
        assert line.dxf.const_width == 3
        assert tuple(colors.int2rgb(line.dxf.true_color)) == (255,0,0)
        assert line.dxf.layer == '0'
        assert not line.closed

    def test_fill_attributes(self):
        d = ezdxfDraw()
        Turtle(d).draw_turtle('#00ff00')
        hatch = entities(d,'HATCH')[0]
        assert hatch.dxf.solid_fill == 1
        assert tuple(colors.int2rgb(hatch.dxf.true_color)) == (0,255,0)

    def test_zero_length_stroke(self):
        d = ezdxfDraw()
        d.begin_path()
        d.move_to([10,10])
        d.line_to([10,10])
        d.stroke()
        assert len(d.doc.modelspace()) == 0
        d.linecap = 'round'
        d.stroke()
        assert len(entities(d,'HATCH')) == 1


class TestLayers:
    def test_layer(self):
        d = ezdxfDraw()
        assert d.layerlist == [False,'0','PATHS','GLYPHS']
        d.layer = 'PATHS'
        Turtle(d).move(1)
        assert entities(d,'LWPOLYLINE')[0].dxf.layer == 'PATHS'
        with pytest.raises(ValueError):
            d.layer = 'NOPE'


class TestClear:
    def test_clear(self):
        d = ezdxfDraw()
        t = Turtle(d)
        t.move(1)
        t.draw_turtle('blue')
        t.clean()
        assert len(d.doc.modelspace()) == 0
        t.clean('navy')
        hatches = entities(d,'HATCH')
        assert len(hatches) == 1
        assert tuple(colors.int2rgb(hatches[0].dxf.true_color)) == (0,0,128)


class TestOutput:
    def test_display(self, tmp_path):
        d = ezdxfDraw()
        d.filename = str(tmp_path / "square")
        t = Turtle(d)
        for i in range(4):
            t.segment(1,0,90)
        t.draw_turtle('red')
        d.display()
        doc = ezdxf.readfile(str(tmp_path / "square.dxf"))
        msp = doc.modelspace()
        assert len(msp.query('LWPOLYLINE')) == 7
        assert len(msp.query('HATCH')) == 5
        assert 'GLYPHS' in doc.layers

    def test_bad_filename(self):
        d = ezdxfDraw()
        with pytest.raises(ValueError):
            d.filename = 42
