"""Headless Canvas Runner - CLI entry point.

Loads a template payload (JSON list of component specs, or an object with
"components" and an optional "name"), inserts it into a fresh canvas,
places any extra components from the component library, applies the
requested group operations and prints the resulting canvas state as JSON.

Usage:
    python editor/src/headless.py <template.json> [--free] [--place TYPE X Y]
                                  [--move DX DY] [--resize W H]
                                  [--marquee X1 Y1 X2 Y2]
                                  [-o OUTPUT] [-v]

Examples:
    python editor/src/headless.py header.json --resize 300 150
    python editor/src/headless.py header.json --move 10 0 -o result.json
    python editor/src/headless.py shapes.json --free --marquee 0 0 200 200
    python editor/src/headless.py header.json --place button 400 40
"""

import sys
import os
import argparse
import json
import logging

# Add editor/src to path so imports work
_src_dir = os.path.dirname(os.path.abspath(__file__))
if _src_dir not in sys.path:
    sys.path.insert(0, _src_dir)

logger = logging.getLogger('headless')


def load_template(file_path: str):
    """Read a template payload file.

    Args:
        file_path: Path to a JSON file.

    Returns:
        (specs, name) where name is None when the file does not give one.

    Raises:
        ValueError: If the payload is not a list or an object with "components".
    """
    with open(file_path, "r", encoding="utf-8-sig") as f:
        data = json.load(f)

    if isinstance(data, list):
        return data, None
    if isinstance(data, dict) and isinstance(data.get('components'), list):
        return data['components'], data.get('name')
    raise ValueError(f"{file_path}: expected a list of components or an object with 'components'")


def run(specs, name=None, free=False, place=None, move=None, resize=None, marquee=None) -> dict:
    """Apply the CLI operations to a fresh canvas and return its snapshot.

    Args:
        specs: Component creation payloads.
        name: Group name (grouped insertion only).
        free: Insert as free-standing components instead of one group.
        place: Optional list of (type, x, y) tool placements, created
            free-standing and centered on (x, y).
        move: Optional (dx, dy) applied to the inserted group.
        resize: Optional (width, height) applied to the inserted group.
        marquee: Optional (x1, y1, x2, y2) marquee selection, applied last.

    Returns:
        Canvas snapshot dict plus a 'results' list of (operation, status).

    Raises:
        ValueError: If a payload is invalid or a placement names an unknown
            type or a non-numeric position.
    """
    from models.canvas import Canvas
    from services.component_factory import make_instance_spec

    canvas = Canvas()
    results = []

    group_id = None
    if free:
        canvas.add_instances(specs)
    else:
        group_id = canvas.add_instances_as_group(specs, name)

    for component_type, x, y in place or []:
        new_id = canvas.create_instance(make_instance_spec(component_type, float(x), float(y)))
        logger.debug(f"Placed {component_type} at ({x}, {y}) as {new_id}")
        results.append(('place', new_id))

    if move is not None:
        if group_id is None:
            logger.warning("--move ignored: components were inserted free-standing")
        else:
            results.append(('move_group', canvas.move_group(group_id, *move).value))

    if resize is not None:
        if group_id is None:
            logger.warning("--resize ignored: components were inserted free-standing")
        else:
            results.append(('resize_group', canvas.resize_group(group_id, *resize).value))

    if marquee is not None:
        hits = canvas.select_in_rect(*marquee)
        results.append(('select_in_rect', hits))

    snapshot = canvas.to_dict()
    snapshot['results'] = results
    return snapshot


def main(argv=None):
    parser = argparse.ArgumentParser(
        description='Apply canvas group operations to a template payload (headless).',
    )
    parser.add_argument(
        'input_file',
        help='Path to a JSON template payload.',
    )
    parser.add_argument(
        '--free',
        action='store_true',
        help='Insert components free-standing instead of wrapping them in a group.',
    )
    parser.add_argument(
        '--name',
        default=None,
        help='Group name (overrides the name in the payload).',
    )
    parser.add_argument(
        '--place',
        nargs=3, action='append', metavar=('TYPE', 'X', 'Y'),
        help='Place a default TYPE component centered on X, Y (repeatable).',
    )
    parser.add_argument(
        '--move',
        nargs=2, type=float, metavar=('DX', 'DY'),
        help='Move the inserted group by DX, DY.',
    )
    parser.add_argument(
        '--resize',
        nargs=2, type=float, metavar=('W', 'H'),
        help='Proportionally resize the inserted group to W x H.',
    )
    parser.add_argument(
        '--marquee',
        nargs=4, type=float, metavar=('X1', 'Y1', 'X2', 'Y2'),
        help='Run a marquee selection over the given rectangle.',
    )
    parser.add_argument(
        '-o', '--output',
        default=None,
        help='Write the JSON result to this file instead of stdout.',
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable verbose logging.',
    )
    args = parser.parse_args(argv)

    # Logging
    level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stderr)],
    )

    input_path = os.path.abspath(args.input_file)
    if not os.path.isfile(input_path):
        print(f"Error: Input file not found: {input_path}", file=sys.stderr)
        return 1

    try:
        specs, name = load_template(input_path)
        snapshot = run(
            specs,
            name=args.name or name,
            free=args.free,
            place=args.place,
            move=args.move,
            resize=args.resize,
            marquee=args.marquee,
        )
    except ValueError as e:
        # InvalidSpecError and malformed JSON are both ValueErrors
        print(f"Error: {e}", file=sys.stderr)
        return 1

    text = json.dumps(snapshot, indent=2)
    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(text + "\n")
        print(f"Wrote {os.path.abspath(args.output)}", file=sys.stderr)
    else:
        print(text)
    return 0


if __name__ == '__main__':
    sys.exit(main())
