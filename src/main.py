import argparse
import asyncio
import sys
import os

# Add project root to sys.path to allow imports from 'src' and 'conf'
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from src.common.config.manager import ConfigManager
from src.common.exceptions import RiskAnalysisError
from src.common.logging import configure_logging
from src.risk.application.builder import RiskApplicationBuilder
from src.risk.application.orchestrator import PRESETS, get_preset
from src.risk.domain import FootageRef, LocationResult
from src.risk.presentation.report import format_analysis


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="SafeSight - Traffic footage risk analysis")
    parser.add_argument('--config-dir', default="conf", help="Directory holding risk/<profile>.yaml")
    parser.add_argument('--profile', default="default", help="Config profile name")
    commands = parser.add_subparsers(dest='command', required=True)

    analyze = commands.add_parser('analyze', help="Analyze one clip and print the report")
    analyze.add_argument('video', help="Footage label (file name)")
    analyze.add_argument('--size', type=int, default=None, help="Footage size in bytes (defaults to the file size if it exists)")
    analyze.add_argument('--lat', type=float, default=20.5937)
    analyze.add_argument('--lon', type=float, default=78.9629)
    analyze.add_argument('--location', default="", help="Short location label")
    analyze.add_argument('--address', default=None, help="Place to geocode instead of --lat/--lon")
    analyze.add_argument('--preset', choices=sorted(PRESETS), default=None)
    analyze.add_argument('--seed', type=int, default=None, help="Seed for the simulated detection source")

    commands.add_parser('serve', help="Start the HTTP API")
    return parser


def run_analysis(args, builder: RiskApplicationBuilder) -> int:
    service = builder.build_repository().build_location_service().build_service()

    size = args.size
    if size is None:
        size = os.path.getsize(args.video) if os.path.isfile(args.video) else 0
    footage = FootageRef(name=os.path.basename(args.video), size_bytes=size)

    location = service.resolve_location(args.address) if args.address else None
    if location is None and args.location:
        location = LocationResult(args.lat, args.lon, args.location)
    elif location is None:
        location = service.describe_coordinates(args.lat, args.lon)

    def on_progress(percent: int):
        print(f"\rAnalyzing... {percent:3d}%", end="", flush=True)

    preset = get_preset(args.preset) if args.preset else None
    analysis = asyncio.run(service.analyze(footage, location, args.location, on_progress=on_progress, preset=preset))
    print()
    print(format_analysis(analysis))
    return 0


def serve(cfg, builder: RiskApplicationBuilder) -> int:
    import uvicorn
    from src.risk.presentation.api import create_app

    service = builder.build_repository().build_location_service().build_service()
    app = create_app(service)
    print(f"Starting server at http://{cfg.server.host}:{cfg.server.port}")
    uvicorn.run(app, host=cfg.server.host, port=cfg.server.port)
    return 0


def main(argv=None) -> int:
    """
    Entry point. Unrecognized key=value arguments are applied as config overrides,
    e.g. `analyze clip.mp4 analysis.max_frames=20 source.seed=7`.
    """
    parser = build_parser()
    args, unknown = parser.parse_known_args(argv)

    overrides = list(unknown)
    if getattr(args, 'seed', None) is not None:
        overrides.append(f"source.seed={args.seed}")

    try:
        cfg = ConfigManager(args.config_dir).load_risk_config(args.profile, overrides)
    except (FileNotFoundError, ValueError, RiskAnalysisError) as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    configure_logging(cfg.logging.level)
    builder = RiskApplicationBuilder(cfg)

    try:
        if args.command == 'analyze':
            return run_analysis(args, builder)
        return serve(cfg, builder)
    except RiskAnalysisError as e:
        print(f"\nError: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
