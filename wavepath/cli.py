import argparse
import json
import logging
from pathlib import Path

from .params import InvalidWaveParams, WaveParams, load_params
from .wave import build_wave_program, generate_wave_path


def generate_main(argv=None):
    ap = argparse.ArgumentParser(description="Generate a repeating cubic wave path")
    ap.add_argument("--params", help="JSON file with the parameter record or a generate-wave message")
    ap.add_argument("--length", type=float, default=100.0, help="Wave length")
    ap.add_argument("--height", type=float, default=20.0, help="Half the peak-to-trough distance")
    ap.add_argument("--roundness", type=float, default=50.0, help="Handle reach, percent")
    ap.add_argument("--offset", type=float, default=0.0, help="Peak shift, percent of wave length")
    ap.add_argument("--waves", type=int, default=4, help="Number of waves")
    ap.add_argument("--clamp-handles", action="store_true", help="Keep handles inside each segment")
    ap.add_argument("--out", help="Output .svg")
    ap.add_argument("--json", dest="json_out", help="Output JSON path record")
    ap.add_argument("--anchors", help="Output JSON polyline anchors")
    ap.add_argument("--samples", type=int, default=16, help="Samples per curve for --anchors")
    ap.add_argument("-v", "--verbose", action="store_true")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        if args.params:
            params = load_params(args.params)
        else:
            params = WaveParams.from_mapping(
                {
                    "waveLength": args.length,
                    "waveHeight": args.height,
                    "waveRoundness": args.roundness,
                    "waveOffset": args.offset,
                    "numWaves": args.waves,
                    "clampHandles": args.clamp_handles,
                }
            )
    except InvalidWaveParams as exc:
        ap.error(str(exc))
    except (OSError, json.JSONDecodeError) as exc:
        ap.error(f"cannot read {args.params}: {exc}")

    descriptor = generate_wave_path(params)

    if args.out:
        from .io.svg_writer import fit_viewport, place_path, to_svg

        viewport = fit_viewport(descriptor)
        to_svg(place_path(descriptor, viewport), args.out, viewport)
        print(f"Wrote {args.out}")
    if args.json_out:
        from .io.svg_writer import to_json

        to_json(descriptor, args.json_out)
        print(f"Wrote {args.json_out}")
    if args.anchors:
        anchors = build_wave_program(params).sample(args.samples).tolist()
        obj = {"paths": [{"id": "wave", "anchors": anchors}]}
        Path(args.anchors).write_text(json.dumps(obj), encoding="utf-8")
        print(f"Wrote {args.anchors}")
    if not (args.out or args.json_out or args.anchors):
        print(descriptor.data)
    return 0


if __name__ == "__main__":
    raise SystemExit(generate_main())
