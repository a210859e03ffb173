# scenes.py
from typing import Callable, Dict, List, Tuple

import numpy as np

from pathtracer.camera.camera import Camera
from pathtracer.core.vector import Color, Point3, Vector3
from pathtracer.geometry.hittable import Hittable
from pathtracer.geometry.scene import Scene
from pathtracer.geometry.sphere import Sphere
from pathtracer.materials.dielectric import Dielectric
from pathtracer.materials.lambertian import Lambertian
from pathtracer.materials.metal import Metal
from pathtracer.materials.presets import ColorPresets, DielectricPresets, TexturePresets

SceneFactory = Callable[[np.random.Generator, float], Tuple[Scene, Camera]]


def demo_scene(rng: np.random.Generator, aspect_ratio: float) -> Tuple[Scene, Camera]:
    """
    Three noise-textured unit spheres (mirror, matte, glass) on a grey ground.
    """
    blue = TexturePresets.noise(rng, ColorPresets.LIGHT_BLUE, 10.0, octaves=20, turbulence=True)
    red = TexturePresets.noise(rng, ColorPresets.LIGHT_RED, 50.0, octaves=10)
    green = TexturePresets.noise(rng, ColorPresets.LIGHT_GREEN, 10.0, octaves=30, turbulence=True)

    left = Sphere(Point3(-2.1, 1.0, 0.0), 1.0, Metal(blue, fuzz=0.0))
    middle = Sphere(Point3(0.0, 1.0, 0.0), 1.0, Lambertian(red))
    right = Sphere(Point3(2.1, 1.0, 0.0), 1.0, Dielectric(1.5, green))
    ground = Sphere(Point3(0.0, -1000.0, 0.0), 1000.0, ColorPresets.matte(ColorPresets.GREY))

    scene = Scene(left, rng)
    scene.push(middle)
    scene.push(right)
    scene.push(ground)

    camera = Camera(Point3(0.0, 1.0, 5.0), Point3(0.0, 1.0, 0.0), Vector3(0.0, 1.0, 0.0),
                    vfov=50.0, aspect_ratio=aspect_ratio, aperture=0.0, focus_dist=5.0)
    return scene, camera


def random_scene(rng: np.random.Generator, aspect_ratio: float) -> Tuple[Scene, Camera]:
    """
    A checkered ground covered in a grid of small random spheres, with three
    large feature spheres in the middle.
    """
    objects: List[Hittable] = [
        Sphere(Point3(0, -1000, 0), 1000, Lambertian(TexturePresets.checkerboard())),
    ]

    clearing = Point3(4, 0.2, 0)
    for a in range(-11, 11):
        for b in range(-11, 11):
            choose_mat = rng.random()
            center = Point3(a + 0.9 * rng.random(), 0.2, b + 0.9 * rng.random())
            if (center - clearing).length() <= 0.9:
                continue

            if choose_mat < 0.8:
                albedo = Color(*rng.random(3)) * Color(*rng.random(3))
                material = Lambertian(albedo)
            elif choose_mat < 0.95:
                albedo = Color(*rng.uniform(0.5, 1.0, 3))
                material = Metal(albedo, fuzz=rng.uniform(0.0, 0.5))
            else:
                material = DielectricPresets.glass()
            objects.append(Sphere(center, 0.2, material))

    objects.append(Sphere(Point3(0, 1, 0), 1.0, DielectricPresets.glass()))
    objects.append(Sphere(Point3(-4, 1, 0), 1.0, Lambertian(Color(0.4, 0.2, 0.1))))
    objects.append(Sphere(Point3(4, 1, 0), 1.0, Metal(Color(0.7, 0.6, 0.5), fuzz=0.0)))

    scene = Scene.from_objects(objects, rng)
    camera = Camera(Point3(13, 2, 3), Point3(0, 0, 0), Vector3(0, 1, 0),
                    vfov=20.0, aspect_ratio=aspect_ratio, aperture=0.1, focus_dist=10.0)
    return scene, camera


SCENES: Dict[str, SceneFactory] = {
    "demo": demo_scene,
    "random": random_scene,
}
