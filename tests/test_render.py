"""Tests for the render loop, tone mapping and image export.

Tests cover:
- Output shape, dtype and seeded determinism
- Progress reporting
- Image orientation
- Row bands and multi-process rendering
- Gamma correction and 8-bit conversion
- PPM and PNG writers
"""

import io

import numpy as np
import pytest
from PIL import Image as PILImage

from pathtracer.camera.camera import Camera
from pathtracer.config import RenderSettings
from pathtracer.core.vector import Color, Point3, Vector3
from pathtracer.geometry.scene import Scene
from pathtracer.geometry.sphere import Sphere
from pathtracer.materials.lambertian import Lambertian
from pathtracer.renderer.output import check_format, save_image, write_ppm
from pathtracer.renderer.render import Renderer, split_rows
from pathtracer.renderer.tone_mapping import gamma_correct, to_rgb8


def small_settings(**kw):
    base = dict(image_height=6, aspect_ratio=2.0, samples_per_pixel=2, max_depth=3, seed=7)
    base.update(kw)
    return RenderSettings(**base)


@pytest.fixture
def camera():
    return Camera(Point3(0, 0, 0), Point3(0, 0, -1), Vector3(0, 1, 0),
                  vfov=90.0, aspect_ratio=2.0)


@pytest.fixture
def sky_only(rng):
    return Scene(Sphere(Point3(0, 0, 50), 0.1, Lambertian(Color(1, 1, 1))), rng)


class TestRenderer:
    """Tests for Renderer."""

    def test_shape_and_dtype(self, two_sphere_scene, camera):
        image = Renderer(two_sphere_scene, camera, small_settings()).render()
        assert image.shape == (6, 12, 3)
        assert image.dtype == np.uint8

    def test_seeded_render_is_deterministic(self, two_sphere_scene, camera):
        a = Renderer(two_sphere_scene, camera, small_settings()).render()
        b = Renderer(two_sphere_scene, camera, small_settings()).render()
        np.testing.assert_array_equal(a, b)

    def test_progress_counts_rows(self, two_sphere_scene, camera):
        calls = []
        Renderer(two_sphere_scene, camera, small_settings()).render(
            progress=lambda done, total: calls.append((done, total)))
        assert len(calls) == 6
        assert calls[-1] == (6, 6)
        assert [d for d, _ in calls] == sorted(d for d, _ in calls)

    def test_top_row_is_bluer(self, sky_only, camera):
        """Row 0 is the top of the image, where the sky is bluest."""
        image = Renderer(sky_only, camera, small_settings()).render_linear()
        assert image[0, :, 0].mean() < image[-1, :, 0].mean()
        np.testing.assert_allclose(image[:, :, 2], 1.0)

    def test_linear_values_in_range(self, two_sphere_scene, camera):
        image = Renderer(two_sphere_scene, camera, small_settings()).render_linear()
        assert image.min() >= 0.0
        assert image.max() <= 1.0

    def test_sphere_darkens_center(self, two_sphere_scene, camera):
        """The sphere in front of the camera is darker than the sky above it."""
        image = Renderer(two_sphere_scene, camera, small_settings(samples_per_pixel=8)).render()
        center = image[3, 6].astype(int).sum()
        sky = image[0, 0].astype(int).sum()
        assert center < sky

    def test_invalid_settings_rejected(self, two_sphere_scene, camera):
        with pytest.raises(ValueError):
            Renderer(two_sphere_scene, camera, small_settings(samples_per_pixel=0))

    def test_worker_processes(self, two_sphere_scene, camera):
        calls = []
        settings = small_settings(workers=2)
        a = Renderer(two_sphere_scene, camera, settings).render(
            progress=lambda done, total: calls.append(done))
        b = Renderer(two_sphere_scene, camera, settings).render()
        assert a.shape == (6, 12, 3)
        np.testing.assert_array_equal(a, b)
        assert calls[-1] == 6


class TestSplitRows:
    """Tests for split_rows."""

    def test_covers_all_rows(self):
        bands = split_rows(10, 3)
        assert [r for band in bands for r in band] == list(range(10))

    def test_more_bands_than_rows(self):
        assert split_rows(2, 8) == [range(0, 1), range(1, 2)]

    def test_single_band(self):
        assert split_rows(5, 1) == [range(0, 5)]


class TestToneMapping:
    """Tests for gamma correction and 8-bit conversion."""

    def test_square_root(self):
        out = gamma_correct(np.array([0.0, 0.25, 1.0]))
        np.testing.assert_allclose(out, [0.0, 0.5, 1.0])

    def test_negative_clipped(self):
        assert gamma_correct(np.array([-0.5]))[0] == 0.0

    def test_other_gamma(self):
        np.testing.assert_allclose(gamma_correct(np.array([0.125]), gamma=3.0), [0.5])

    def test_to_rgb8_truncates_and_clamps(self):
        out = to_rgb8(np.array([0.0, 0.5, 1.0, 1.2]))
        assert out.dtype == np.uint8
        assert out.tolist() == [0, 127, 255, 255]


class TestOutput:
    """Tests for PPM and PNG export."""

    @pytest.fixture
    def image(self):
        img = np.zeros((2, 3, 3), dtype=np.uint8)
        img[0, 0] = (255, 0, 0)
        img[1, 2] = (1, 2, 3)
        return img

    def test_ppm_layout(self, image):
        buf = io.StringIO()
        write_ppm(image, buf)
        lines = buf.getvalue().splitlines()
        assert lines[:3] == ["P3", "3 2", "255"]
        assert len(lines) == 3 + 6
        assert lines[3] == "255 0 0"
        assert lines[-1] == "1 2 3"

    def test_save_ppm(self, image, tmp_path):
        path = save_image(image, tmp_path / "out.ppm")
        assert path.read_text().startswith("P3\n3 2\n255\n")

    def test_save_png(self, image, tmp_path):
        path = save_image(image, tmp_path / "out.png")
        with PILImage.open(path) as loaded:
            assert loaded.size == (3, 2)
            np.testing.assert_array_equal(np.asarray(loaded.convert("RGB")), image)

    def test_unsupported_suffix(self, image, tmp_path):
        with pytest.raises(ValueError, match="Unsupported"):
            save_image(image, tmp_path / "out.jpg")
        assert not (tmp_path / "out.jpg").exists()

    def test_check_format_case_insensitive(self):
        check_format("render.PNG")
        with pytest.raises(ValueError):
            check_format("render")
