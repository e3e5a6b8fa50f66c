from __future__ import annotations

import argparse
import logging
import sys

from shared.config.loader import load_settings

from apps.qrsnap.compose import build_app
from apps.qrsnap.output import copy_to_clipboard, notify, render


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(
        prog="qrsnap",
        description="Read QR codes from an area of the screen, or from every monitor.",
    )
    ap.add_argument(
        "-s", "--select", action="store_true", help="Click and drag to capture part of the display."
    )
    ap.add_argument(
        "-c", "--clip", action="store_true", help="Copy output directly to the clipboard."
    )
    ap.add_argument("--no-notify", action="store_true", help="Skip the desktop notification.")
    ap.add_argument("--json", action="store_true", help="Print the scan report as JSON.")
    ap.add_argument(
        "--timeout",
        type=float,
        metavar="S",
        help="Give up on an unfinished selection after S seconds (0 waits forever).",
    )
    ap.add_argument("--profile", help="Config profile under configs/profiles/ (default: dev).")
    ap.add_argument("--quiet", action="store_true", help="Reduce console output.")
    ap.add_argument("-v", "--verbose", action="count", default=0, help="More logging (-vv debug).")
    return ap.parse_args(argv)


def _log_level(configured: str, verbose: int) -> int:
    if verbose >= 2:
        return logging.DEBUG
    if verbose == 1:
        return logging.INFO
    level = logging.getLevelName(configured.upper())
    return level if isinstance(level, int) else logging.WARNING


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    settings = load_settings(profile=args.profile)  # uses loader/env/profile

    if args.clip:
        settings.output.clipboard = True
    if args.no_notify:
        settings.output.notify = False
    if args.timeout is not None:
        settings.selection.timeout_s = args.timeout

    logging.basicConfig(
        level=_log_level(settings.log_level, args.verbose),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = build_app(settings, select=args.select)
    if not args.quiet:
        print(
            f"[qrsnap] mode={'select' if args.select else 'all'} "
            f"capture={settings.capture.adapter} decoder={settings.decoder.adapter}",
            file=sys.stderr,
        )
        if args.select:
            print("[qrsnap] click and drag over the QR code...", file=sys.stderr)

    try:
        report = app.scanner.scan_selection() if args.select else app.scanner.scan_all_monitors()
    except KeyboardInterrupt:
        if not args.quiet:
            print("\n[qrsnap] cancelled.", file=sys.stderr)
        return 130
    finally:
        app.close()

    if not report.found and not args.quiet:
        print("[qrsnap] no QR found.", file=sys.stderr)

    if app.notifier is not None:
        notify(report, app.notifier)

    if app.clipboard is not None:
        copied = copy_to_clipboard(
            report, app.clipboard, app.sleeper, settings.output.clipboard_hold_s
        )
        if not copied:
            # fall back to print
            print(render(report, as_json=args.json))
    else:
        print(render(report, as_json=args.json))

    return 0 if report.found else 1


if __name__ == "__main__":
    raise SystemExit(main())
