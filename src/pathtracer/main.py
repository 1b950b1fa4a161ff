# main.py
import argparse
import logging
import sys
from pathtracer import config
from pathtracer.core.utils import reseed
from pathtracer.geometry.bvh import BVHConstructionError
from pathtracer.renderer.raytracer import Renderer
from pathtracer.renderer.tone_mapping import tone_map
from pathtracer.renderer.image_io import save_image
from pathtracer.scenes import UnknownSceneError, available_scenes, get_scene

logger = logging.getLogger("pathtracer")

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pathtracer",
        description="Offline Monte Carlo path tracer",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example:
  # Quick look at the Cornell box
  pathtracer --scene cornell_box --quality preview --output preview.png

  # Full quality render of the cover scene, reproducible
  pathtracer --scene random_scene --width 1200 --aspect-ratio 1.5 \\
      --samples 500 --seed 7
        """
    )
    parser.add_argument('--scene', type=str, default=config.DEFAULT_SCENE,
                        choices=available_scenes(),
                        help=f'Scene to render (default: {config.DEFAULT_SCENE})')
    parser.add_argument('--width', type=int, default=config.IMAGE_WIDTH,
                        help=f'Image width in pixels before quality scaling (default: {config.IMAGE_WIDTH})')
    parser.add_argument('--aspect-ratio', type=float, default=config.ASPECT_RATIO,
                        help=f'Width / height (default: {config.ASPECT_RATIO})')
    parser.add_argument('--samples', type=int, default=None,
                        help=f'Samples per pixel (default: {config.SAMPLES_PER_PIXEL}, or the quality preset)')
    parser.add_argument('--max-depth', type=int, default=None,
                        help=f'Maximum bounces per path (default: {config.MAX_DEPTH}, or the quality preset)')
    parser.add_argument('--quality', type=str, default=None,
                        choices=sorted(config.QUALITY_LEVELS),
                        help='Named preset for samples, depth and resolution scale')
    parser.add_argument('--workers', type=int, default=None,
                        help='Worker processes (default: CPU count; 1 renders in-process)')
    parser.add_argument('--jobs', type=int, default=config.NUM_JOBS,
                        help=f'Row bands the image is split into (default: {config.NUM_JOBS})')
    parser.add_argument('--texture', type=str, default=None,
                        help=f'Image for textured scenes (default: {config.EARTH_TEXTURE})')
    parser.add_argument('--output', type=str, default=config.OUTPUT_PATH,
                        help=f'Output image path (default: {config.OUTPUT_PATH})')
    parser.add_argument('--seed', type=int, default=None,
                        help='Seed for scene generation and sampling')
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument('--verbose', '-v', action='store_true',
                           help='Log debug details such as BVH build times')
    verbosity.add_argument('--quiet', '-q', action='store_true',
                           help='Only log warnings and errors; hide the progress bar')
    return parser

def resolve_settings(args: argparse.Namespace):
    """
    Combines explicit options with the quality preset. Explicit --samples and
    --max-depth win over the preset; the preset scale applies to --width.
    Returns (width, height, samples, max_depth).
    """
    samples, max_depth, scale = config.SAMPLES_PER_PIXEL, config.MAX_DEPTH, 1.0
    if args.quality is not None:
        quality = config.QUALITY_LEVELS[args.quality]
        samples, max_depth, scale = quality["samples"], quality["depth"], quality["scale"]
    if args.samples is not None:
        samples = args.samples
    if args.max_depth is not None:
        max_depth = args.max_depth
    if args.aspect_ratio <= 0:
        raise ValueError(f"Aspect ratio must be positive, got {args.aspect_ratio}")

    width = int(args.width * scale)
    height = int(width / args.aspect_ratio)
    return width, height, samples, max_depth

def configure_logging(verbose: bool = False, quiet: bool = False):
    level = logging.INFO
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    logging.basicConfig(level=level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose, args.quiet)

    try:
        width, height, samples, max_depth = resolve_settings(args)
        reseed(args.seed)
        scene = get_scene(args.scene, args.aspect_ratio, args.texture)
        renderer = Renderer(width, height, samples, max_depth, workers=args.workers,
                            jobs=args.jobs, seed=args.seed, progress=not args.quiet)
        accumulated = renderer.render(scene)
        save_image(tone_map(accumulated, samples), args.output)
    except (ValueError, FileNotFoundError, UnknownSceneError, BVHConstructionError) as e:
        logger.error("%s", e)
        return 1
    except KeyboardInterrupt:
        logger.warning("Render interrupted")
        return 130
    return 0

if __name__ == "__main__":
    sys.exit(main())
