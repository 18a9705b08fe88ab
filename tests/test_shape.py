"""Tests for the behaviour shared by every shape."""

import math

import pytest

from whitted.core.matrix import IDENTITY, DegenerateTransform
from whitted.core.ray import Ray
from whitted.core.transform import rotation_y, rotation_z, scaling, translation
from whitted.core.tuples import point, vector
from whitted.geometry.group import Group
from whitted.geometry.shape import Shape
from whitted.geometry.sphere import Sphere
from whitted.materials.material import Material


class RecordingShape(Shape):
    """Remembers the object-space ray it was asked to intersect."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.saved_ray = None

    def local_intersect(self, local_ray):
        self.saved_ray = local_ray
        return []

    def local_normal_at(self, local_point):
        return vector(local_point.x, local_point.y, local_point.z)


class TestDefaults:
    def test_default_transform_and_material(self):
        s = RecordingShape()
        assert s.transform == IDENTITY
        assert s.material == Material()
        assert s.parent is None

    def test_assign_transform_caches_inverse(self):
        s = RecordingShape()
        s.transform = translation(2.0, 3.0, 4.0)
        assert s.inverse == translation(-2.0, -3.0, -4.0)

    def test_degenerate_transform_is_rejected(self):
        s = RecordingShape()
        with pytest.raises(DegenerateTransform):
            s.transform = scaling(0.0, 1.0, 1.0)
        assert s.transform == IDENTITY

    def test_abstract_methods_raise(self):
        s = Shape()
        with pytest.raises(NotImplementedError):
            s.local_intersect(Ray(point(0.0, 0.0, 0.0), vector(0.0, 0.0, 1.0)))
        with pytest.raises(NotImplementedError):
            s.bounds()


class TestObjectSpace:
    """World rays and normals are converted through the transform."""

    def test_scaled_shape_gets_scaled_ray(self):
        s = RecordingShape(transform=scaling(2.0, 2.0, 2.0))
        s.intersect(Ray(point(0.0, 0.0, -5.0), vector(0.0, 0.0, 1.0)))
        assert s.saved_ray.origin == point(0.0, 0.0, -2.5)
        assert s.saved_ray.direction == vector(0.0, 0.0, 0.5)

    def test_translated_shape_gets_translated_ray(self):
        s = RecordingShape(transform=translation(5.0, 0.0, 0.0))
        s.intersect(Ray(point(0.0, 0.0, -5.0), vector(0.0, 0.0, 1.0)))
        assert s.saved_ray.origin == point(-5.0, 0.0, -5.0)
        assert s.saved_ray.direction == vector(0.0, 0.0, 1.0)

    def test_normal_on_translated_shape(self):
        s = RecordingShape(transform=translation(0.0, 1.0, 0.0))
        n = s.normal_at(point(0.0, 1.70711, -0.70711))
        assert n == vector(0.0, 0.70711, -0.70711)

    def test_normal_on_transformed_shape_uses_inverse_transpose(self):
        s = RecordingShape(transform=scaling(1.0, 0.5, 1.0) * rotation_z(math.pi / 5))
        n = s.normal_at(point(0.0, math.sqrt(2) / 2, -math.sqrt(2) / 2))
        assert n == vector(0.0, 0.97014, -0.24254)
        assert n.w == 0.0


class TestParentChain:
    """Shapes nested in groups convert through every ancestor."""

    def test_world_to_object(self):
        g1 = Group(transform=rotation_y(math.pi / 2))
        g2 = Group(transform=scaling(2.0, 2.0, 2.0))
        g1.add_child(g2)
        s = Sphere(transform=translation(5.0, 0.0, 0.0))
        g2.add_child(s)
        assert s.world_to_object(point(-2.0, 0.0, -10.0)) == point(0.0, 0.0, -1.0)

    def test_normal_to_world(self):
        g1 = Group(transform=rotation_y(math.pi / 2))
        g2 = Group(transform=scaling(1.0, 2.0, 3.0))
        g1.add_child(g2)
        s = Sphere(transform=translation(5.0, 0.0, 0.0))
        g2.add_child(s)
        r = math.sqrt(3) / 3
        assert s.normal_to_world(vector(r, r, r)) == vector(0.28571, 0.42857, -0.85714)

    def test_normal_on_child(self):
        g1 = Group(transform=rotation_y(math.pi / 2))
        g2 = Group(transform=scaling(1.0, 2.0, 3.0))
        g1.add_child(g2)
        s = Sphere(transform=translation(5.0, 0.0, 0.0))
        g2.add_child(s)
        n = s.normal_at(point(1.7321, 1.1547, -5.5774))
        assert tuple(n) == pytest.approx((0.28570, 0.42854, -0.85716, 0.0), abs=1e-4)

    def test_parent_reference_is_weak(self):
        s = Sphere()
        g = Group()
        g.add_child(s)
        linked = s.parent is g
        assert linked
        del g
        assert s.parent is None

    def test_parent_space_bounds(self):
        s = Sphere(transform=translation(1.0, -3.0, 5.0) * scaling(0.5, 2.0, 4.0))
        box = s.parent_space_bounds()
        assert box.minimum == point(0.5, -5.0, 1.0)
        assert box.maximum == point(1.5, -1.0, 9.0)
