import os
import sys
from argparse import ArgumentParser
from dataclasses import dataclass
from pathlib import Path

from mandel import (
    DEFAULT_PALETTE,
    ConfigurationError,
    OutputError,
    RenderEngine,
    RenderParameters,
    colormap_palette,
    default_workers,
    load_palette,
    write_image,
)
from mandel.palette import describe_palette

VERBOSE = False


def log(message, *args, **kwargs):
    if VERBOSE:
        print(message, *args, **kwargs)


@dataclass
class OutputConfig:
    image_path: Path
    image_format: str


def build_parser():
    parser = ArgumentParser(description='Render an antialiased image of the Mandelbrot set.')

    parser.add_argument('--x-center', '-x', type=float,
                        dest='x_center', help='center point of the image, real part',
                        metavar='X_CENTER', default=-0.75)

    parser.add_argument('--y-center', '-y', type=float,
                        dest='y_center', help='center point of the image, imaginary part',
                        metavar='Y_CENTER', default=0.0)

    parser.add_argument('--magnification', '-m', type=float,
                        dest='magnification', help='magnification level; larger values zoom in',
                        metavar='MAGNIFICATION', default=0.4)

    parser.add_argument('--max-iterations', '-i', type=int,
                        dest='max_iterations', help='maximum iterations per point',
                        metavar='MAX_ITERATIONS', default=1000)

    parser.add_argument('--x-res', type=int,
                        dest='x_res', help='horizontal size of the image in pixels',
                        metavar='X_RES', default=1024)

    parser.add_argument('--y-res', type=int,
                        dest='y_res', help='vertical size of the image in pixels',
                        metavar='Y_RES', default=768)

    parser.add_argument('--antialias', '-a', type=int,
                        dest='antialias', help='anti-aliasing level for a smoother image (1 is off)',
                        metavar='ANTIALIAS', default=2)

    parser.add_argument('--continuous', '-c', action='store_true',
                        help='enable the continuous color gradient')

    parser.add_argument('--palette', type=str,
                        dest='palette', help='palette JSON file: an array of [red, green, blue, alpha] byte arrays',
                        metavar='PALETTE', default=None)

    parser.add_argument('--colormap', type=str,
                        dest='colormap', help='build the palette from a matplotlib colormap (e.g. "viridis", "twilight_shifted")',
                        metavar='COLORMAP', default=None)

    parser.add_argument('--colormap-size', type=int,
                        dest='colormap_size', help='number of colors sampled from --colormap',
                        metavar='COLORMAP_SIZE', default=256)

    parser.add_argument('--inside-color', type=str, default='#000000',
                        help='hex color for points inside the Mandelbrot set')

    parser.add_argument('--workers', type=int,
                        dest='workers', help='number of worker threads (default: number of CPUs)',
                        metavar='WORKERS', default=None)

    parser.add_argument('--output', '-o', dest='output', type=str,
                        help='output file name', default='mandelbrot.png')

    parser.add_argument('--format', type=str,
                        dest='format', help='image file format; any extension supported by Pillow. Default: "png".',
                        metavar='FORMAT', default='png')

    parser.add_argument('--no-progress', dest='progress', action='store_false',
                        help='do not print the percent-complete line while rendering')

    parser.add_argument('-v', '--verbose', action='store_true',
                        help='enable verbose logging of the render settings')

    return parser


def resolve_output_config(opt, parser: ArgumentParser) -> OutputConfig:
    image_format = (opt.format or "png").lower().lstrip(".") or "png"

    output_arg = opt.output
    if str(output_arg).endswith(tuple(filter(None, {os.sep, os.altsep}))):
        parser.error("--output must be a file path.")
    output_path = Path(output_arg).expanduser()
    if output_path.exists() and output_path.is_dir():
        parser.error("--output must point to a file, not a directory.")

    suffix = output_path.suffix
    expected_suffix = f".{image_format}"
    if suffix:
        if suffix.lower() != expected_suffix.lower():
            parser.error(f"--output extension {suffix} does not match --format {image_format}.")
    else:
        output_path = output_path.with_suffix(expected_suffix)

    return OutputConfig(image_path=output_path.resolve(), image_format=image_format)


def parse_hex_color(hex_color):
    hex_color = hex_color.lstrip('#')
    if len(hex_color) != 6:
        raise ValueError('inside color must be in the form #RRGGBB.')
    try:
        return tuple(int(hex_color[i:i + 2], 16) for i in (0, 2, 4))
    except ValueError as exc:
        raise ValueError('inside color must contain only hexadecimal digits.') from exc


def resolve_palette(opt, parser: ArgumentParser):
    if opt.palette and opt.colormap:
        parser.error("--palette and --colormap cannot be combined.")
    if opt.palette:
        return load_palette(opt.palette)
    if opt.colormap:
        return colormap_palette(opt.colormap, opt.colormap_size)
    return DEFAULT_PALETTE


def print_progress(done, total):
    print("\r{0:.2f}%".format(100.0 * done / total), end='', flush=True)


def main(argv=None):
    parser = build_parser()
    opt = parser.parse_args(argv)

    global VERBOSE
    VERBOSE = bool(opt.verbose)

    output_config = resolve_output_config(opt, parser)

    try:
        inside_color = parse_hex_color(opt.inside_color)
    except ValueError as exc:
        parser.error(f"Invalid --inside-color '{opt.inside_color}': {exc}")

    if opt.workers is not None and opt.workers < 1:
        parser.error(f"--workers must be 1 or higher: found {opt.workers}")

    try:
        palette = resolve_palette(opt, parser)
        params = RenderParameters(
            x_res=opt.x_res,
            y_res=opt.y_res,
            x_center=opt.x_center,
            y_center=opt.y_center,
            magnification=opt.magnification,
            max_iterations=opt.max_iterations,
            antialias=opt.antialias,
            continuous=bool(opt.continuous),
            palette=palette,
            inside_color=inside_color,
        )
        engine = RenderEngine(params).initialize()
    except ConfigurationError as exc:
        parser.error(str(exc))

    workers = opt.workers if opt.workers is not None else default_workers()
    log("Rendering {0}x{1} at ({2}, {3}), magnification {4}".format(
        params.x_res, params.y_res, params.x_center, params.y_center, params.magnification))
    log("Max iterations {0}, antialias {1}x{1}, {2} coloring, {3} worker threads".format(
        params.max_iterations, params.antialias, "continuous" if params.continuous else "discrete", workers))
    log("Palette: %s" % describe_palette(params.palette))

    canvas = engine.render(workers=workers, progress=print_progress if opt.progress else None)
    if opt.progress:
        print("\rfinished")

    try:
        path = write_image(canvas, output_config.image_path, output_config.image_format)
    except OutputError as exc:
        parser.exit(1, f"{exc}\n")

    log("Wrote %s" % path)
    return 0


if __name__ == '__main__':
    sys.exit(main())
