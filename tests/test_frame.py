import random

import pytest
from turtle3d.frame import *
from turtle3d.errors import (
    IndeterminateOrientationError,
    InvalidArgumentError,
    InvalidFrameError,
)
from turtle3d.vec import close, dot, mag, vclose
## unit tests for turtle3d frame.py

TOL = 1e-9

def assert_orthonormal(f):
    assert abs(mag(f.heading) - 1.0) < TOL
    assert abs(mag(f.normal) - 1.0) < TOL
    assert abs(dot(f.heading,f.normal)) < TOL


class TestConstruction:
    def test_default(self):
        f = TurtleFrame()
        assert f.position == [0.0,0.0,0.0]
        assert f.heading == [0.0,1.0,0.0]
        assert f.normal == [0.0,0.0,1.0]
        assert f.left == [-1.0,0.0,0.0]
        assert f.right == [1.0,0.0,0.0]
        assert f.check()

    def test_copy_is_independent(self):
        f = TurtleFrame([1,2,3])
        g = f.copy()
        assert g == f
        g.move(1)
        assert g != f
        assert f.position == [1,2,3]

    def test_non_unit_heading(self):
        with pytest.raises(InvalidFrameError):
            TurtleFrame(heading=[0,2,0])

    def test_non_orthogonal(self):
        with pytest.raises(InvalidFrameError):
            TurtleFrame(heading=[0,0,1],normal=[0,0,1])

    def test_malformed_vectors(self):
        with pytest.raises(InvalidFrameError):
            TurtleFrame(position=[float('nan'),0,0])
        with pytest.raises(InvalidFrameError):
            TurtleFrame(heading=[1,0])
        with pytest.raises(InvalidFrameError):
            TurtleFrame(normal='up')

    def test_invalid_frame_is_value_error(self):
        with pytest.raises(ValueError):
            TurtleFrame(heading=[1,1,0])

    def test_degenerate_left(self):
        f = TurtleFrame()
        f.heading = [0.0,0.0,1.0]
        with pytest.raises(IndeterminateOrientationError):
            f.left
        with pytest.raises(IndeterminateOrientationError):
            f.turn(10)

    def test_reset(self):
        f = TurtleFrame([1,1,1],[1,0,0],[0,0,1])
        f.reset([5,6,0])
        assert f == TurtleFrame([5,6,0])


class TestMotion:
    def test_move(self):
        f = TurtleFrame()
        old, new = f.move(2,unit=10)
        assert old == [0.0,0.0,0.0]
        assert new == [0.0,20.0,0.0]
        assert f.position == new

    def test_move_backward(self):
        f = TurtleFrame()
        f.move(-1.5)
        assert vclose(f.position,[0,-1.5,0])

    def test_turn(self):
        f = TurtleFrame()
        f.turn(90)
        assert vclose(f.heading,[-1,0,0])
        assert f.normal == [0.0,0.0,1.0]

    def test_roll(self):
        f = TurtleFrame()
        f.roll(90)
        assert vclose(f.normal,[1,0,0])
        assert f.heading == [0.0,1.0,0.0]

    def test_dive(self):
        f = TurtleFrame()
        f.dive(90)
        assert vclose(f.normal,[0,1,0])
        assert vclose(f.heading,[0,0,-1])
        assert_orthonormal(f)

    def test_dive_keeps_left(self):
        f = TurtleFrame()
        f.roll(33)
        f.turn(-71)
        left = f.left
        f.dive(25)
        assert vclose(f.left,left)

    def test_zero_angles(self):
        f = TurtleFrame()
        f.roll(20)
        f.turn(35)
        g = f.copy()
        f.turn(0)
        f.roll(0)
        f.dive(0)
        assert vclose(f.heading,g.heading)
        assert vclose(f.normal,g.normal)

    def test_large_angles(self):
        f = TurtleFrame()
        f.turn(720+90)
        assert vclose(f.heading,[-1,0,0])

    def test_bad_arguments(self):
        f = TurtleFrame()
        with pytest.raises(InvalidArgumentError):
            f.turn(float('nan'))
        with pytest.raises(InvalidArgumentError):
            f.roll(float('inf'))
        with pytest.raises(InvalidArgumentError):
            f.dive('10')
        with pytest.raises(InvalidArgumentError):
            f.move(None)
        assert f == TurtleFrame()


class TestInvariants:
    def test_orthonormal_under_random_motion(self):
        rng = random.Random(1234)
        f = TurtleFrame()
        ops = [f.turn, f.roll, f.dive]
        for i in range(2000):
            rng.choice(ops)(rng.uniform(-400.0,400.0))
            assert_orthonormal(f)

    def test_move_inverse(self):
        rng = random.Random(99)
        f = TurtleFrame([150.0,200.0,0.0])
        for i in range(50):
            f.turn(rng.uniform(-180,180))
            f.dive(rng.uniform(-180,180))
            start = list(f.position)
            d = rng.uniform(-20,20)
            f.move(d,unit=30)
            f.move(-d,unit=30)
            assert vclose(f.position,start)

    @pytest.mark.parametrize("phi", [0.1, 17.0, -90.0, 123.456, 1e4])
    def test_turn_inverse(self, phi):
        f = TurtleFrame()
        f.roll(40)
        f.dive(-25)
        heading = list(f.heading)
        f.turn(phi)
        f.turn(-phi)
        assert vclose(f.heading,heading)

    @pytest.mark.parametrize("psi", [0.1, 45.0, -170.0, 361.0])
    def test_roll_inverse(self, psi):
        f = TurtleFrame()
        f.turn(30)
        f.dive(10)
        normal = list(f.normal)
        f.roll(psi)
        f.roll(-psi)
        assert vclose(f.normal,normal)

    def test_repeated_dives(self):
        f = TurtleFrame()
        f.roll(0.3)
        f.turn(0.7)
        for i in range(1000):
            f.dive(37)
            assert_orthonormal(f)
        assert abs(mag(f.left) - 1.0) < TOL
        f.turn(10)
        assert_orthonormal(f)

    def test_overflowing_move(self):
        f = TurtleFrame([150.0,200.0,0.0])
        with pytest.raises(InvalidArgumentError):
            f.move(1e307,unit=30)
        assert f.position == [150.0,200.0,0.0]
        assert f.check()
