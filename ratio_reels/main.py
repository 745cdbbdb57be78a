"""
Entrada principal de ratio-reels.
Consulta el registro de composiciones y escribe frames, subtítulos, previews y manifiestos.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .config import DEFAULT_CONFIG_PATH, Settings, load_settings
from .director import TimelineLoader, TimelineValidator
from .errors import RatioReelsError
from .registry import CompositionRegistry, default_registry
from .video.exporter import FrameExporter
from .video.preview import SvgPreview
from .video.subtitles import CaptionExporter

logger = logging.getLogger(__name__)
console = Console()


def cmd_list(registry: CompositionRegistry, settings: Settings, args) -> int:
    table = Table(title="Composiciones registradas")
    table.add_column("Id", style="green")
    table.add_column("FPS", justify="right")
    table.add_column("Frames", justify="right")
    table.add_column("Duración", justify="right", style="yellow")
    table.add_column("Tamaño", style="blue")
    table.add_column("Escenas", justify="right")

    for composition in registry:
        entry = composition.entry
        table.add_row(entry.id, str(entry.fps), str(entry.duration_in_frames),
                      f"{entry.duration_seconds:.1f}s", f"{entry.width}x{entry.height}",
                      str(len(composition.scenes)))
    console.print(table)
    return 0


def cmd_render(registry: CompositionRegistry, settings: Settings, args) -> int:
    output = registry.render(args.composition, args.frame)
    # print() para que la salida se pueda redirigir sin markup
    print(output.to_json(indent=2 if args.pretty else None))
    return 0


def cmd_preview(registry: CompositionRegistry, settings: Settings, args) -> int:
    composition = registry.get(args.composition)
    output = composition.render(args.frame)
    path = Path(args.output) if args.output else \
        Path(settings.output_dir) / f"{composition.id}_{args.frame:05d}.svg"
    SvgPreview(scale=args.scale or settings.preview_scale).write(output, path)
    console.print(f"[green]✓ Preview: {path}[/green]")
    return 0


def cmd_captions(registry: CompositionRegistry, settings: Settings, args) -> int:
    composition = registry.get(args.composition)
    exporter = CaptionExporter(output_dir=settings.output_dir, fps=composition.fps)
    path = exporter.export(composition.captions, composition.id, fmt=args.format)
    console.print(f"[green]✓ {len(composition.captions)} subtítulos: {path}[/green]")
    return 0


def cmd_manifest(registry: CompositionRegistry, settings: Settings, args) -> int:
    compositions = [registry.get(args.composition)] if args.composition else list(registry)
    path = FrameExporter(output_dir=settings.output_dir).manifest(compositions)
    console.print(f"[green]✓ Manifiesto: {path}[/green]")
    return 0


def cmd_validate(registry: CompositionRegistry, settings: Settings, args) -> int:
    if args.file:
        compositions = [TimelineLoader().load_file(args.file)]
    elif args.composition:
        compositions = [registry.get(args.composition)]
    else:
        compositions = list(registry)

    validator = TimelineValidator(strict=args.strict or settings.strict_validation)
    failed = 0
    for composition in compositions:
        result = validator.validate(composition)
        status = "[green]✓ válida[/green]" if result else "[red]✗ inválida[/red]"
        console.print(f"{composition.id}: {status} "
                      f"({len(result.errors)} errores, {len(result.warnings)} advertencias)")
        for error in result.errors:
            console.print(f"  [red]• {error}[/red]")
        for warning in result.warnings:
            console.print(f"  [yellow]• {warning}[/yellow]")
        if not result:
            failed += 1
    return 1 if failed else 0


def cmd_export(registry: CompositionRegistry, settings: Settings, args) -> int:
    composition = TimelineLoader().load_file(args.file) if args.file else registry.get(args.composition)
    exporter = FrameExporter(
        output_dir=settings.output_dir,
        workers=args.workers or settings.workers,
        preview_scale=settings.preview_scale,
    )
    path = exporter.export(composition, start=args.start, end=args.end, fmt=args.format)
    console.print(f"[green]✓ Exportado: {path}[/green]")
    return 0


COMMANDS = {
    "list": cmd_list,
    "render": cmd_render,
    "preview": cmd_preview,
    "captions": cmd_captions,
    "manifest": cmd_manifest,
    "validate": cmd_validate,
    "export": cmd_export,
}


def build_parser(settings: Optional[Settings] = None) -> argparse.ArgumentParser:
    default_id = settings.default_composition if settings else None

    parser = argparse.ArgumentParser(
        prog="ratio-reels",
        description="Compositor de videos promocionales RATIO",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--config", default=DEFAULT_CONFIG_PATH, help="Ruta a config.yaml")
    parser.add_argument("-v", "--verbose", action="store_true", help="Logging en nivel DEBUG")
    sub = parser.add_subparsers(dest="command")

    sub.add_parser("list", help="Listar composiciones registradas")

    p = sub.add_parser("render", help="Imprimir el JSON de un frame")
    p.add_argument("composition")
    p.add_argument("frame", type=int)
    p.add_argument("--pretty", action="store_true", help="JSON indentado")

    p = sub.add_parser("preview", help="Escribir un SVG de boceto de un frame")
    p.add_argument("composition")
    p.add_argument("frame", type=int)
    p.add_argument("-o", "--output", help="Ruta del SVG")
    p.add_argument("--scale", type=float, help="Escala (default: config)")

    p = sub.add_parser("captions", help="Exportar subtítulos")
    p.add_argument("composition", nargs="?", default=default_id)
    p.add_argument("--format", choices=["ass", "srt"], default="ass")

    p = sub.add_parser("manifest", help="Manifiesto para el renderizador externo")
    p.add_argument("composition", nargs="?")

    p = sub.add_parser("validate", help="Validar composiciones")
    p.add_argument("composition", nargs="?")
    p.add_argument("--file", help="Timeline declarativo (JSON/YAML)")
    p.add_argument("--strict", action="store_true", help="Las advertencias también fallan")

    p = sub.add_parser("export", help="Exportar un rango de frames")
    p.add_argument("composition", nargs="?", default=default_id)
    p.add_argument("--file", help="Timeline declarativo en lugar de una composición registrada")
    p.add_argument("--start", type=int, default=0)
    p.add_argument("--end", type=int, help="Frame final exclusivo (default: duración)")
    p.add_argument("--format", choices=["json", "svg"], default="json")
    p.add_argument("--workers", type=int, help="Procesos (default: config)")

    return parser


def _config_path(argv: List[str]) -> str:
    # --config se necesita antes de construir el parser completo
    pre = argparse.ArgumentParser(add_help=False)
    pre.add_argument("--config", default=DEFAULT_CONFIG_PATH)
    known, _ = pre.parse_known_args(argv)
    return known.config


def main(argv: Optional[List[str]] = None) -> int:
    """Punto de entrada CLI."""
    argv = sys.argv[1:] if argv is None else argv
    settings = load_settings(_config_path(argv))
    parser = build_parser(settings)
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if not args.command:
        parser.print_help()
        return 0

    try:
        registry = default_registry()
        return COMMANDS[args.command](registry, settings, args)
    except RatioReelsError as e:
        logger.error(f"{args.command} falló: {e}")
        console.print(Panel(f"[red]{e}[/red]", title="Error"))
        return 1
    except ValueError as e:
        console.print(f"[red]✗ {e}[/red]")
        return 2


if __name__ == "__main__":
    sys.exit(main())
