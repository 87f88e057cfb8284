"""
Command line entry point.

Prints the view and projection matrices for one projector of a calibrated
ensemble described in a YAML configuration file.

Usage:
    projector-camera configs/ensemble.yaml
    projector-camera configs/ensemble.yaml --projector 2 --zfar 50
    projector-camera configs/ensemble.yaml camera.znear=0.5
"""

from __future__ import annotations
import argparse
import json
import sys
from typing import Optional, Sequence

import yaml
from omegaconf.errors import OmegaConfBaseException

from .core.config import CameraConfig, load_config
from .core.projector import camera_from_config
from .camera.pose import InvalidPoseError
from .camera.projection import InvalidFrustumError
from .utils.debug import debug_print


def parse_args(argv: Optional[Sequence[str]] = None):
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(
        prog="projector-camera",
        description="Render camera matrices for a calibrated projector",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  projector-camera configs/ensemble.yaml
  projector-camera configs/ensemble.yaml --projector 1 --column-major
        """
    )

    parser.add_argument(
        "config",
        type=str,
        help="Path to YAML configuration file"
    )
    parser.add_argument(
        "overrides",
        nargs="*",
        default=[],
        help="Dotlist overrides, e.g. camera.zfar=50"
    )
    parser.add_argument(
        "--projector", "-p",
        type=int,
        default=None,
        help="Projector index (overrides camera.projector_index)"
    )
    parser.add_argument("--znear", type=float, default=None, help="Near clipping plane")
    parser.add_argument("--zfar", type=float, default=None, help="Far clipping plane")
    parser.add_argument(
        "--column-major",
        action="store_true",
        help="Emit transposed (column-major) matrices"
    )

    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)

    overrides = list(args.overrides)
    if args.znear is not None:
        overrides.append(f"camera.znear={args.znear}")
    if args.zfar is not None:
        overrides.append(f"camera.zfar={args.zfar}")

    try:
        cfg = load_config(args.config, overrides)
    except (FileNotFoundError, OmegaConfBaseException, yaml.YAMLError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    debug_print(f"[cli] config: {cfg}")

    try:
        camera = camera_from_config(cfg, args.projector)
    except (InvalidPoseError, InvalidFrustumError, IndexError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    column_major = args.column_major or CameraConfig.from_dict(cfg.get("camera")).column_major
    if column_major:
        view, proj = camera.column_major()
    else:
        view, proj = camera.view_matrix, camera.projection_matrix

    result = {
        "name": camera.name,
        "width": camera.width,
        "height": camera.height,
        "column_major": column_major,
        "view_matrix": view.tolist(),
        "projection_matrix": proj.tolist(),
        "camera_position": camera.position.tolist(),
        "orientation_wxyz": camera.orientation.as_wxyz().tolist(),
        "tanfovx": camera.tanfovx,
        "tanfovy": camera.tanfovy,
    }
    print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
