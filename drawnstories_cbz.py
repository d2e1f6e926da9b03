from __future__ import annotations

from pathlib import Path

from drawnstories import download_comics, parse_args, usage, validate_args
from drawnstories.ui import ConsoleUI


def main() -> None:
    args = parse_args()
    validate_args(args)

    ui = ConsoleUI()

    try:
        download_comics(
            url=args.url,
            issues=args.issues,
            output_directory=Path(args.output),
            timeout=args.timeout,
            workers=args.workers,
            ui=ui,
        )
    except KeyboardInterrupt:
        ui.log_event("Download interrupted by user.", level="error")
        raise SystemExit("Download interrupted by user.")
    except Exception:
        # download_comics already reported the error through the UI.
        raise SystemExit("\n" + usage()) from None
    finally:
        ui.finalize()


if __name__ == "__main__":
    main()
