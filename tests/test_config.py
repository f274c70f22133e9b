import pytest
from turtle3d.config import *
from turtle3d.errors import ConfigError, TurtleError


class TestOrigin:
    def test_center(self):
        assert parse_origin(None,400,300) == [150.0,200.0,0.0]
        assert parse_origin('',400,300) == [150.0,200.0,0.0]
        assert parse_origin('mc',400,300) == [150.0,200.0,0.0]

    def test_corners(self):
        assert parse_origin('tl',400,300) == [0.0,0.0,0.0]
        assert parse_origin('br',400,300) == [300,400,0.0]
        assert parse_origin('rb',400,300) == [300,400,0.0]
        assert parse_origin('t',400,300) == [0.0,200.0,0.0]

    def test_later_letters_win(self):
        assert parse_origin('tb',400,300) == [300,200.0,0.0]

    def test_bad_letter(self):
        with pytest.raises(ConfigError):
            parse_origin('tx',400,300)


class TestTurtleConfig:
    def test_defaults(self):
        c = TurtleConfig()
        assert c.unit == 30
        assert c.width == 400
        assert c.height == 300
        assert c.origin is None
        assert c.surface == 'TGspace'
        assert c.home() == [150.0,200.0,0.0]

    @pytest.mark.parametrize("kw", [
        {'unit': 0},
        {'unit': -1},
        {'unit': float('nan')},
        {'width': 'wide'},
        {'height': float('inf')},
        {'origin': 5},
        {'origin': 'zz'},
        {'surface': None},
    ])
    def test_validation(self, kw):
        with pytest.raises(ConfigError):
            TurtleConfig(**kw)

    def test_error_types(self):
        with pytest.raises(ValueError):
            TurtleConfig(unit=0)
        with pytest.raises(TurtleError):
            TurtleConfig(unit=0)

    def test_updated(self):
        c = TurtleConfig()
        c2 = c.updated(unit=10,origin='tl')
        assert c2.unit == 10
        assert c2.home() == [0.0,0.0,0.0]
        assert c.unit == 30
        with pytest.raises(ConfigError):
            c.updated(colour='red')
        with pytest.raises(ConfigError):
            c.updated(origin='q')

    def test_mapping(self):
        c = TurtleConfig.from_mapping({'unit': 12, 'origin': 'br'})
        assert c.unit == 12
        assert c.to_mapping() == {'unit': 12, 'width': 400, 'height': 300,
                                  'origin': 'br', 'surface': 'TGspace'}
        with pytest.raises(ConfigError):
            TurtleConfig.from_mapping({'scale': 2})
        with pytest.raises(ConfigError):
            TurtleConfig.from_mapping([1,2])


class TestFiles:
    def test_load(self, tmp_path):
        path = tmp_path / "turtle.yaml"
        path.write_text("unit: 20\nwidth: 640\nheight: 480\norigin: tl\n")
        c = load_config(path)
        assert c == TurtleConfig(unit=20,width=640,height=480,origin='tl')

    def test_load_empty(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(str(path)) == TurtleConfig()

    def test_missing(self, tmp_path):
        with pytest.raises(ConfigError):
            load_config(tmp_path / "nope.yaml")

    def test_malformed(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("unit: [1, 2\n")
        with pytest.raises(ConfigError):
            load_config(path)

    def test_not_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- 1\n- 2\n")
        with pytest.raises(ConfigError):
            load_config(path)

    def test_bad_value(self, tmp_path):
        path = tmp_path / "neg.yaml"
        path.write_text("unit: -3\n")
        with pytest.raises(ConfigError):
            load_config(path)

    def test_save(self, tmp_path):
        path = tmp_path / "out.yaml"
        c = TurtleConfig(unit=7.5,origin='mr')
        save_config(c,path)
        assert load_config(path) == c


class TestDefaultsStack:
    def test_push_pop(self):
        s = DefaultsStack()
        assert len(s) == 1
        s.push(unit=10)
        assert len(s) == 2
        assert s.top.unit == 10
        s.push(origin='tl')
        assert s.top.unit == 10
        assert s.top.origin == 'tl'
        s.pop()
        s.pop()
        assert s.top == TurtleConfig()

    def test_bottom_kept(self):
        base = TurtleConfig(unit=5)
        s = DefaultsStack(base)
        assert s.pop() == base
        assert len(s) == 1

    def test_set(self):
        s = DefaultsStack()
        s.push()
        s.set(unit=3)
        assert s.top.unit == 3
        s.pop()
        assert s.top.unit == 30

    def test_failed_push(self):
        s = DefaultsStack()
        with pytest.raises(ConfigError):
            s.push(unit=-1)
        assert len(s) == 1
        assert s.top == TurtleConfig()
