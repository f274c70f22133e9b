import pytest
from turtle3d.script import *
from turtle3d.errors import InvalidArgumentError, ScriptError
from turtle3d.events import CommandLog, CommandRecord
from turtle3d.recording_drawable import RecordingDraw
from turtle3d.turtle import Turtle
from turtle3d.vec import vclose

SQUARE = """
// a square with a turtle at each end
DrawTurtle('blue');
S(1, 0, 90); S(1, 0, 90)
S(1, 0, 90); S(1, 0, 90)   # back home
DT("red");
"""

class TestRecords:
    def test_to_script(self):
        assert CommandRecord('Move',(1,)).to_script() == 'Move(1);'
        assert CommandRecord('Home').to_script() == 'Home();'
        assert CommandRecord('Turn',(90.0,)).to_script() == 'Turn(90);'
        assert CommandRecord('Turn',(12.5,)).to_script() == 'Turn(12.5);'
        assert CommandRecord('PenActive',(True,)).to_script() == 'PenActive(true);'
        assert CommandRecord('SetPenStyle',("it's",)).to_script() == "SetPenStyle('it\\'s');"

    def test_log(self):
        log = CommandLog()
        log.append(CommandRecord('Move',(1,)))
        log.append(CommandRecord('Roll',(-5,)))
        assert len(log) == 2
        assert log[1].name == 'Roll'
        assert [r.name for r in log] == ['Move','Roll']
        assert log.to_script() == 'Move(1);\nRoll(-5);\n'
        log.clear()
        assert log.names() == []


class TestParse:
    def test_basic(self):
        cmds = parse_script("Move(1); Turn(90);\nDT('red')")
        assert cmds == [CommandRecord('Move',(1,)),
                        CommandRecord('Turn',(90,)),
                        CommandRecord('DrawTurtle',('red',))]

    def test_values(self):
        cmds = parse_script("M(1.5);M(-2);M(1e2);M(.5);PA(false);SetPenStyle('a\\'b')")
        assert [c.args[0] for c in cmds] == [1.5,-2,100.0,0.5,False,"a'b"]
        assert isinstance(cmds[1].args[0],int)
        assert isinstance(cmds[2].args[0],float)

    def test_aliases(self):
        cmds = parse_script("PA(true);PD();PU();M(1);T(2);R(3);D(4);S(1,2,3);DT('red')")
        assert [c.name for c in cmds] == ['PenActive','PenDown','PenUp','Move','Turn',
                                          'Roll','Dive','Segment','DrawTurtle']

    def test_comments_and_blank_lines(self):
        cmds = parse_script("\n\n# only a comment\n// another\n\nHome()\n;;\n")
        assert cmds == [CommandRecord('Home')]

    def test_empty(self):
        assert parse_script("") == []

    def test_clean_optional_color(self):
        cmds = parse_script("Clean(); Clean('white')")
        assert cmds[0].args == ()
        assert cmds[1].args == ('white',)

    def test_unknown_command(self):
        with pytest.raises(ScriptError) as exc:
            parse_script("Move(1)\n\nFly(2)")
        assert exc.value.line == 3
        assert str(exc.value).startswith('line 3: ')

    def test_arg_count(self):
        with pytest.raises(ScriptError):
            parse_script("Move(1,2)")
        with pytest.raises(ScriptError):
            parse_script("Segment(1,2)")
        with pytest.raises(ScriptError):
            parse_script("Clean('red','blue')")

    def test_syntax(self):
        with pytest.raises(ScriptError):
            parse_script("Move(1) Move(2)")
        with pytest.raises(ScriptError) as exc:
            parse_script("Move(1)\nMove(1")
        assert exc.value.line == 2
        with pytest.raises(ScriptError):
            parse_script("Move(@)")
        with pytest.raises(ScriptError):
            parse_script("Move 1")
        with pytest.raises(ScriptError):
            parse_script("Move(1,)")

    def test_script_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_script("Nope()")


class TestRun:
    def test_square(self):
        d = RecordingDraw()
        t = Turtle(d)
        n = run_script(t,parse_script(SQUARE))
        assert n == 6
        assert len(d.commands) == 8 + 4 + 8
        assert vclose(t.position,[150.0,200.0,0.0])

    def test_replay_log(self):
        log = CommandLog()
        d1 = RecordingDraw()
        t1 = Turtle(d1,log=log)
        run_script(t1,parse_script(SQUARE + "Dive(30); SetPenWidth(3); M(1.5); PU(); M(1)"))
        replay = parse_script(log.to_script())
        assert replay == log.records
        d2 = RecordingDraw()
        run_script(Turtle(d2),replay)
        assert d2.commands == d1.commands

    def test_unknown_record(self):
        t = Turtle(RecordingDraw())
        with pytest.raises(ScriptError):
            run_script(t,[CommandRecord('Fly',(1,))])

    def test_bad_argument(self):
        t = Turtle(RecordingDraw())
        with pytest.raises(InvalidArgumentError):
            run_script(t,parse_script("SetPenStyle('notacolor')"))
