# main.py
import argparse
import logging
import math
from typing import List, Optional

from whitted.camera.camera import Camera
from whitted.config import DEFAULT_QUALITY, QUALITY_LEVELS, quality_settings, setup_logging
from whitted.core.color import Color
from whitted.core.transform import chain, rotation_y, scaling, translation, view_transform
from whitted.core.tuples import point, vector
from whitted.geometry.cone import Cone
from whitted.geometry.cube import Cube
from whitted.geometry.cylinder import Cylinder
from whitted.geometry.group import Group
from whitted.geometry.plane import Plane
from whitted.geometry.sphere import Sphere
from whitted.geometry.triangle import Triangle
from whitted.geometry.world import World
from whitted.materials.light import PointLight
from whitted.materials.presets import (ColorPresets, DielectricPresets, MetalPresets,
                                       TexturePresets)
from whitted.renderer.raytracer import Renderer

logger = logging.getLogger(__name__)


def pyramid(material, transform=None) -> Group:
    """Square pyramid of four triangular sides plus a two-triangle base."""
    apex = point(0.0, 1.0, 0.0)
    corners = [point(-1.0, 0.0, -1.0), point(1.0, 0.0, -1.0),
               point(1.0, 0.0, 1.0), point(-1.0, 0.0, 1.0)]
    group = Group(transform)
    for i in range(4):
        group.add_child(Triangle(corners[i], corners[(i + 1) % 4], apex, material=material))
    group.add_child(Triangle(corners[0], corners[2], corners[1], material=material))
    group.add_child(Triangle(corners[0], corners[3], corners[2], material=material))
    return group


def create_world() -> World:
    """
    Create the demo scene: a checkered floor with a glass sphere, a mirror
    cube, a capped cylinder, a cone and a pyramid built from triangles.
    """
    world = World()

    # Floor
    floor_material = TexturePresets.checkerboard()
    floor_material.reflective = 0.1
    world.add(Plane(material=floor_material))

    # Glass sphere in the middle
    world.add(Sphere(transform=translation(0.0, 1.0, 0.0), material=DielectricPresets.glass()))

    # Mirror cube on the left, turned toward the camera
    world.add(Cube(transform=chain(scaling(0.7, 0.7, 0.7), rotation_y(math.pi / 6),
                                   translation(-2.6, 0.7, 1.5)),
                   material=MetalPresets.mirror()))

    # Capped cylinder on the right
    world.add(Cylinder(minimum=0.0, maximum=1.5, closed=True,
                       transform=chain(scaling(0.6, 1.0, 0.6), translation(2.4, 0.0, 1.0)),
                       material=ColorPresets.matte(ColorPresets.RED)))

    # Lower nappe of a cone (y = -1..0), apex up, lifted onto the floor
    world.add(Cone(minimum=-1.0, maximum=0.0, closed=True,
                   transform=chain(scaling(0.6, 1.6, 0.6), translation(1.6, 1.6, 3.5)),
                   material=ColorPresets.matte(ColorPresets.ORANGE)))

    # Pyramid behind the sphere
    world.add(pyramid(MetalPresets.gold(),
                      chain(scaling(1.0, 1.5, 1.0), rotation_y(math.pi / 4),
                            translation(-1.0, 0.0, 4.0))))

    world.add_light(PointLight(point(-10.0, 10.0, -10.0), Color(1.0, 1.0, 1.0)))
    logger.info("Created world with %d objects", len(world.objects))
    return world


def create_camera(width: int, height: int) -> Camera:
    return Camera(width, height, math.pi / 3,
                  view_transform(point(0.0, 2.5, -6.0), point(0.0, 1.0, 1.0),
                                 vector(0.0, 1.0, 0.0)))


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Whitted-style recursive ray tracer demo")
    parser.add_argument("--output", "-o", default="render.png",
                        help="output file (.png or any Pillow format, or .ppm)")
    parser.add_argument("--width", "-w", type=int, default=400, help="image width in pixels")
    parser.add_argument("--height", type=int, default=300, help="image height in pixels")
    parser.add_argument("--depth", "-d", type=int, default=None,
                        help="maximum reflection/refraction depth (overrides --quality)")
    parser.add_argument("--quality", "-q", choices=sorted(QUALITY_LEVELS), default=DEFAULT_QUALITY,
                        help="quality preset: recursion depth and resolution scale")
    parser.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING, ...")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None):
    args = parse_args(argv)
    setup_logging(args.log_level)

    quality = quality_settings(args.quality)
    width = max(1, int(args.width * quality["scale"]))
    height = max(1, int(args.height * quality["scale"]))
    depth = args.depth if args.depth is not None else quality["depth"]

    world = create_world()
    camera = create_camera(width, height)
    renderer = Renderer(max_depth=depth)

    step = max(1, height // 10)

    def report(done: int, total: int):
        if done % step == 0 or done == total:
            logger.info("Progress: %d%%", 100 * done // total)

    canvas = renderer.render(camera, world, progress=report)
    canvas.save(args.output)
    logger.info("Saved %s (%dx%d, quality %s, depth %d)",
                args.output, width, height, args.quality, depth)


if __name__ == "__main__":
    main()
