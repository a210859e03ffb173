# main.py
import argparse
import sys
import time
from pathlib import Path
from typing import List, Optional

from pathtracer.config import QUALITY_LEVELS, RenderSettings
from pathtracer.core.utils import make_rng
from pathtracer.geometry.bvh import count_nodes, tree_depth
from pathtracer.renderer.output import check_format, save_image
from pathtracer.renderer.render import Renderer
from pathtracer.scenes import SCENES


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="pathtracer",
        description="Render a sphere scene with a path tracer.",
        epilog="example:\n  pathtracer --scene random --height 120 --samples 20 --seed 1 --output spheres.ppm",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--scene",
        choices=sorted(SCENES),
        default="demo",
        help="Scene to render (default: demo)",
    )
    parser.add_argument(
        "--quality",
        choices=list(QUALITY_LEVELS),
        default="preview",
        help="Quality preset (default: preview)",
    )
    parser.add_argument("--height", type=int, help="Image height in pixels")
    parser.add_argument("--samples", type=int, help="Samples per pixel")
    parser.add_argument("--depth", type=int, help="Maximum bounces per ray")
    parser.add_argument("--seed", type=int, help="Seed for reproducible renders")
    parser.add_argument(
        "--workers",
        type=int,
        default=1,
        help="Processes rendering bands of rows (default: 1)",
    )
    parser.add_argument(
        "--output",
        type=str,
        default="render.png",
        help="Output file path, .png or .ppm (default: render.png)",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress progress output",
    )
    return parser.parse_args(argv)


def render_scene(
    scene_name: str,
    settings: RenderSettings,
    output_path: str,
    quiet: bool = False,
) -> Path:
    """Build a scene, render it and save the image.

    Args:
        scene_name: Key into ``SCENES``.
        settings: Validated render settings.
        output_path: Destination file; the suffix picks the format.
        quiet: If True, suppress progress output.

    Returns:
        Path to the saved image file.
    """
    check_format(output_path)
    rng = make_rng(settings.seed)
    scene, camera = SCENES[scene_name](rng, settings.aspect_ratio)

    if not quiet:
        print(f"Scene '{scene_name}': {len(scene)} spheres")
        print(f"BVH nodes: {count_nodes(scene.bvh_root)}, depth: {tree_depth(scene.bvh_root)}")
        print(
            f"Rendering {settings.image_width}x{settings.image_height}, "
            f"{settings.samples_per_pixel} samples, {settings.max_depth} bounces, "
            f"{settings.workers} worker(s)..."
        )

    start_time = time.time()

    def progress_callback(done: int, total: int) -> None:
        if not quiet:
            elapsed = time.time() - start_time
            print(
                f"\r  {total - done} scanlines remaining ({elapsed:.1f}s)    ",
                end="",
                flush=True,
            )

    renderer = Renderer(scene, camera, settings)
    image = renderer.render(progress=progress_callback)

    if not quiet:
        print()  # Newline after progress

    output_file = save_image(image, output_path)

    if not quiet:
        print(f"Saved to: {output_file.absolute()}")
        print(f"Total time: {time.time() - start_time:.2f}s")

    return output_file


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    try:
        settings = RenderSettings.from_quality(
            args.quality,
            image_height=args.height,
            samples_per_pixel=args.samples,
            max_depth=args.depth,
            seed=args.seed,
            workers=args.workers,
        )
        render_scene(args.scene, settings, args.output, quiet=args.quiet)
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
