"""ASCII ray tracer: a sphere, a box and a floor seen from a rotating camera."""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional, Sequence

from .vectors import Vec2, Vec3, box, clamp, plane, reflect, rotate_y, rotate_z, sphere

GRADIENT = " .:!/r(l1Z4H9W8$@"
PIXEL_ASPECT = 11.0 / 24.0
LIGHT = Vec3(-0.5, 0.5, -1.0).normalized()
SPHERE_POS = Vec3(0.0, 3.0, 0.0)
GROUND = Vec3(0.0, 0.0, -1.0)
CAMERA = Vec3(-6.0, 0.0, 0.0)

_FAR = 99999.0
_BOUNCES = 5


def _shade(ro: Vec3, rd: Vec3) -> float:
    diff = 1.0
    for _ in range(_BOUNCES):
        nearest = _FAR
        normal = Vec3.splat(0.0)
        albedo = 1.0
        hit = sphere(ro - SPHERE_POS, rd, 1.0)
        if hit.x > 0:
            nearest = hit.x
            normal = (ro - SPHERE_POS + rd * hit.x).normalized()
        hit, box_normal = box(ro, rd, 1.0)
        if 0 < hit.x < nearest:
            nearest = hit.x
            normal = box_normal
        t = plane(ro, rd, GROUND, 1.0)
        if 0 < t < nearest:
            nearest = t
            normal = GROUND
            albedo = 0.5
        if not nearest < _FAR:
            break
        diff *= (normal.dot(LIGHT) * 0.5 + 0.5) * albedo
        ro = ro + rd * (nearest - 0.01)
        rd = reflect(rd, normal)
    return diff


def render_frame(width: int, height: int, t: int) -> List[str]:
    """Render frame ``t`` as ``height`` rows of ``width`` characters."""
    aspect = width / height
    size = Vec2(width, height)
    rows = []
    for j in range(height):
        row = []
        for i in range(width):
            uv = Vec2(i, j) / size * 2.0 - 1.0
            uv = Vec2(uv.x * aspect * PIXEL_ASPECT, uv.y)
            ro = rotate_z(rotate_y(CAMERA, 0.25), t * 0.01)
            rd = rotate_z(rotate_y(Vec3.from_vec2(2.0, uv).normalized(), 0.25), t * 0.01)
            color = clamp(int(_shade(ro, rd) * 20), 0, len(GRADIENT) - 1)
            row.append(GRADIENT[color])
        rows.append("".join(row))
    return rows


def _positive(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {text}")
    return value


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Animate the ASCII scene in the terminal.")
    parser.add_argument("--width", type=_positive, default=240)
    parser.add_argument("--height", type=_positive, default=60)
    parser.add_argument("--frames", type=_positive, default=10000)
    args = parser.parse_args(argv)

    out = sys.stdout
    out.write("\x1b[2J")
    try:
        for t in range(args.frames):
            rows = render_frame(args.width, args.height, t)
            out.write("\x1b[H" + "\n".join(rows))
            out.flush()
    except KeyboardInterrupt:
        pass
    out.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())