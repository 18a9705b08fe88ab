"""Tests for the world: intersection, shadows and recursive shading."""

import math

import pytest

from whitted.core.color import BLACK, WHITE, Color
from whitted.core.ray import Ray
from whitted.core.transform import translation
from whitted.core.tuples import point, vector
from whitted.geometry.intersection import Intersection, intersections, prepare_computations
from whitted.geometry.plane import Plane
from whitted.geometry.sphere import Sphere
from whitted.geometry.world import World, default_world
from whitted.materials.light import PointLight
from whitted.materials.material import Material
from whitted.materials.pattern import Pattern

HALF_SQRT2 = math.sqrt(2) / 2


class PositionPattern(Pattern):
    """Colors each point with its own pattern-space coordinates."""

    def pattern_at(self, p):
        return Color(p.x, p.y, p.z)


class TestConstruction:
    def test_empty_world(self):
        w = World()
        assert w.objects == []
        assert w.lights == []

    def test_add_shapes_and_lights(self):
        w = World()
        s = Sphere()
        light = PointLight(point(0.0, 0.0, 0.0), WHITE)
        w.add(s)
        w.add_light(light)
        assert s in w
        assert w.lights == [light]

    def test_clear_removes_shapes_and_lights(self, world):
        world.clear()
        assert world.objects == []
        assert world.lights == []

    def test_default_world(self, world):
        light = world.lights[0]
        assert light.position == point(-10.0, 10.0, -10.0)
        assert light.intensity == WHITE
        s1, s2 = world.objects
        assert s1.material.color == Color(0.8, 1.0, 0.6)
        assert s1.material.diffuse == 0.7
        assert s1.material.specular == 0.2
        assert s2.inverse * point(0.5, 0.0, 0.0) == point(1.0, 0.0, 0.0)


class TestIntersect:
    def test_all_intersections_sorted(self, world, forward_ray):
        xs = world.intersect(forward_ray)
        assert [i.t for i in xs] == pytest.approx([4.0, 4.5, 5.5, 6.0])

    def test_intersect_first_respects_distance(self, world, forward_ray):
        assert world.intersect_first(forward_ray, 3.9) is None
        found = world.intersect_first(forward_ray, 10.0)
        assert found is not None
        assert 0 < found.t < 10.0

    def test_intersect_first_ignores_hits_behind(self, world):
        r = Ray(point(0.0, 0.0, 5.0), vector(0.0, 0.0, 1.0))
        assert world.intersect_first(r) is None


class TestShadows:
    @pytest.mark.parametrize("p, expected", [
        (point(0.0, 10.0, 0.0), False),
        (point(10.0, -10.0, 10.0), True),
        (point(-20.0, 20.0, -20.0), False),
        (point(-2.0, 2.0, -2.0), False),
    ])
    def test_is_shadowed(self, world, p, expected):
        assert world.is_shadowed(p, world.lights[0]) is expected

    def test_object_between_point_and_light(self):
        w = World([Sphere()], [PointLight(point(0.0, 0.0, -10.0), WHITE)])
        assert w.is_shadowed(point(0.0, 0.0, 10.0), w.lights[0])

    def test_shade_hit_in_shadow(self, approx_color):
        s1 = Sphere()
        s2 = Sphere(transform=translation(0.0, 0.0, 10.0))
        w = World([s1, s2], [PointLight(point(0.0, 0.0, -10.0), WHITE)])
        r = Ray(point(0.0, 0.0, 5.0), vector(0.0, 0.0, 1.0))
        comps = prepare_computations(Intersection(4.0, s2), r)
        assert approx_color(w.shade_hit(comps), 0.1, 0.1, 0.1)


class TestShading:
    def test_shade_hit_outside(self, world, outer_sphere, forward_ray, approx_color):
        comps = prepare_computations(Intersection(4.0, outer_sphere), forward_ray)
        assert approx_color(world.shade_hit(comps), 0.38066, 0.47583, 0.2855)

    def test_shade_hit_inside(self, world, inner_sphere, approx_color):
        world.lights = [PointLight(point(0.0, 0.25, 0.0), WHITE)]
        r = Ray(point(0.0, 0.0, 0.0), vector(0.0, 0.0, 1.0))
        comps = prepare_computations(Intersection(0.5, inner_sphere), r)
        assert approx_color(world.shade_hit(comps), 0.90498, 0.90498, 0.90498)

    def test_every_light_contributes(self, world, forward_ray):
        single = world.color_at(forward_ray)
        world.add_light(PointLight(point(-10.0, 10.0, -10.0), WHITE))
        double = world.color_at(forward_ray)
        assert double == single * 2

    def test_color_at_miss_is_black(self, world):
        r = Ray(point(0.0, 0.0, -5.0), vector(0.0, 1.0, 0.0))
        assert world.color_at(r) == BLACK

    def test_color_at_hit(self, world, forward_ray, approx_color):
        assert approx_color(world.color_at(forward_ray), 0.38066, 0.47583, 0.2855)

    def test_color_at_hit_behind_ray_origin_is_ignored(self, world, outer_sphere, inner_sphere):
        outer_sphere.material.ambient = 1.0
        inner_sphere.material.ambient = 1.0
        r = Ray(point(0.0, 0.0, 0.75), vector(0.0, 0.0, -1.0))
        assert world.color_at(r) == inner_sphere.material.color

    def test_empty_world_is_black(self, forward_ray):
        assert World().color_at(forward_ray) == BLACK


class TestReflection:
    def test_non_reflective_material(self, world, inner_sphere):
        inner_sphere.material.ambient = 1.0
        r = Ray(point(0.0, 0.0, 0.0), vector(0.0, 0.0, 1.0))
        comps = prepare_computations(Intersection(1.0, inner_sphere), r)
        assert world.reflected_color(comps) == BLACK

    def test_reflective_material(self, world, approx_color):
        shape = Plane(transform=translation(0.0, -1.0, 0.0), material=Material(reflective=0.5))
        world.add(shape)
        r = Ray(point(0.0, 0.0, -3.0), vector(0.0, -HALF_SQRT2, HALF_SQRT2))
        comps = prepare_computations(Intersection(math.sqrt(2), shape), r)
        assert approx_color(world.reflected_color(comps), 0.19032, 0.2379, 0.14274, abs=1e-3)

    def test_shade_hit_with_reflective_material(self, world, approx_color):
        shape = Plane(transform=translation(0.0, -1.0, 0.0), material=Material(reflective=0.5))
        world.add(shape)
        r = Ray(point(0.0, 0.0, -3.0), vector(0.0, -HALF_SQRT2, HALF_SQRT2))
        comps = prepare_computations(Intersection(math.sqrt(2), shape), r)
        assert approx_color(world.shade_hit(comps), 0.87677, 0.92436, 0.82918, abs=1e-3)

    def test_mutually_reflective_surfaces_terminate(self):
        w = World(lights=[PointLight(point(0.0, 0.0, 0.0), WHITE)])
        w.add(Plane(transform=translation(0.0, -1.0, 0.0), material=Material(reflective=1.0)))
        w.add(Plane(transform=translation(0.0, 1.0, 0.0), material=Material(reflective=1.0)))
        color = w.color_at(Ray(point(0.0, 0.0, 0.0), vector(0.0, 1.0, 0.0)))
        assert isinstance(color, Color)

    def test_no_depth_left_returns_black(self, world):
        shape = Plane(transform=translation(0.0, -1.0, 0.0), material=Material(reflective=0.5))
        world.add(shape)
        r = Ray(point(0.0, 0.0, -3.0), vector(0.0, -HALF_SQRT2, HALF_SQRT2))
        comps = prepare_computations(Intersection(math.sqrt(2), shape), r)
        assert world.reflected_color(comps, 0) == BLACK

    def test_depth_zero_renders_local_lighting_only(self, world, forward_ray, outer_sphere):
        outer_sphere.material.reflective = 1.0
        outer_sphere.material.transparency = 1.0
        comps = prepare_computations(Intersection(4.0, outer_sphere), forward_ray)
        assert world.reflected_color(comps, 0) == BLACK
        assert world.refracted_color(comps, 0) == BLACK


class TestRefraction:
    def test_opaque_surface(self, world, outer_sphere, forward_ray):
        xs = intersections(Intersection(4.0, outer_sphere), Intersection(6.0, outer_sphere))
        comps = prepare_computations(xs[0], forward_ray, xs)
        assert world.refracted_color(comps, 5) == BLACK

    def test_no_depth_left(self, world, outer_sphere, forward_ray):
        outer_sphere.material.transparency = 1.0
        outer_sphere.material.refractive_index = 1.5
        xs = intersections(Intersection(4.0, outer_sphere), Intersection(6.0, outer_sphere))
        comps = prepare_computations(xs[0], forward_ray, xs)
        assert world.refracted_color(comps, 0) == BLACK

    def test_total_internal_reflection(self, world, outer_sphere):
        outer_sphere.material.transparency = 1.0
        outer_sphere.material.refractive_index = 1.5
        r = Ray(point(0.0, 0.0, HALF_SQRT2), vector(0.0, 1.0, 0.0))
        xs = intersections(Intersection(-HALF_SQRT2, outer_sphere),
                           Intersection(HALF_SQRT2, outer_sphere))
        comps = prepare_computations(xs[1], r, xs)
        assert world.refracted_color(comps, 5) == BLACK

    def test_refracted_ray(self, world, outer_sphere, inner_sphere, approx_color):
        outer_sphere.material.ambient = 1.0
        outer_sphere.material.pattern = PositionPattern()
        inner_sphere.material.transparency = 1.0
        inner_sphere.material.refractive_index = 1.5
        r = Ray(point(0.0, 0.0, 0.1), vector(0.0, 1.0, 0.0))
        xs = intersections(Intersection(-0.9899, outer_sphere), Intersection(-0.4899, inner_sphere),
                           Intersection(0.4899, inner_sphere), Intersection(0.9899, outer_sphere))
        comps = prepare_computations(xs[2], r, xs)
        assert approx_color(world.refracted_color(comps, 5), 0.0, 0.99888, 0.04725, abs=1e-3)

    def test_shade_hit_with_transparent_material(self, world, approx_color):
        floor = Plane(transform=translation(0.0, -1.0, 0.0),
                      material=Material(transparency=0.5, refractive_index=1.5))
        ball = Sphere(transform=translation(0.0, -3.5, -0.5),
                      material=Material(color=Color(1.0, 0.0, 0.0), ambient=0.5))
        world.add(floor)
        world.add(ball)
        r = Ray(point(0.0, 0.0, -3.0), vector(0.0, -HALF_SQRT2, HALF_SQRT2))
        xs = intersections(Intersection(math.sqrt(2), floor))
        comps = prepare_computations(xs[0], r, xs)
        assert approx_color(world.shade_hit(comps, 5), 0.93642, 0.68642, 0.68642)

    def test_shade_hit_blends_with_schlick(self, world, approx_color):
        floor = Plane(transform=translation(0.0, -1.0, 0.0),
                      material=Material(reflective=0.5, transparency=0.5, refractive_index=1.5))
        ball = Sphere(transform=translation(0.0, -3.5, -0.5),
                      material=Material(color=Color(1.0, 0.0, 0.0), ambient=0.5))
        world.add(floor)
        world.add(ball)
        r = Ray(point(0.0, 0.0, -3.0), vector(0.0, -HALF_SQRT2, HALF_SQRT2))
        xs = intersections(Intersection(math.sqrt(2), floor))
        comps = prepare_computations(xs[0], r, xs)
        assert approx_color(world.shade_hit(comps, 5), 0.93391, 0.69643, 0.69243, abs=1e-3)


def test_default_world_is_fresh_each_call():
    a = default_world()
    b = default_world()
    assert a.objects[0] is not b.objects[0]
    a.objects[0].material.ambient = 1.0
    assert b.objects[0].material.ambient == 0.1
