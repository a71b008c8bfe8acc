import logging
import os
import sys
from typing import Mapping, Optional, Sequence, TextIO

from pomo.alerts import CompletionAlertService
from pomo.app_config import ConfigStore, resolve_config_root
from pomo.cli import COMMAND_BREAK, COMMAND_END, parse_args, resolve_command
from pomo.colors import ColorStore
from pomo.pomodoro import MODE_BREAK, MODE_POMODORO, CountdownTimer
from pomo.runtime import (
    CommandContext,
    RuntimeBootstrap,
    TerminalDisplay,
    TickDependencies,
    TickProcessor,
    TimerRuntime,
)
from pomo.runtime import commands
from pomo.session import SessionRegistry, StatusPublisher

LOG_LEVEL_ENV = "POMO_LOG_LEVEL"


def setup_logging(level: Optional[int] = None) -> logging.Logger:
    """Configure stderr logging; quiet by default so the display stays clean."""
    if level is None:
        level_name = (os.getenv(LOG_LEVEL_ENV) or "WARNING").strip().upper()
        resolved = logging.getLevelName(level_name)
        level = resolved if isinstance(resolved, int) else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    return logging.getLogger("pomo")


def main(
    argv: Optional[Sequence[str]] = None,
    *,
    environ: Optional[Mapping[str, str]] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> int:
    """Run one pomo invocation and return its exit status."""
    args = parse_args(argv)
    logger = setup_logging()

    root_dir = resolve_config_root(environ)
    logger.debug("Using config root: %s", root_dir)
    status = StatusPublisher(root_dir, logger=logging.getLogger("pomo.status"))
    ctx = CommandContext(
        config_store=ConfigStore(root_dir, logger=logging.getLogger("pomo.config")),
        color_store=ColorStore(root_dir, logger=logging.getLogger("pomo.colors")),
        registry=SessionRegistry(
            root_dir,
            status=status,
            logger=logging.getLogger("pomo.session"),
        ),
        status=status,
        logger=logger,
        stdout=stdout or sys.stdout,
        stderr=stderr or sys.stderr,
    )

    if args.status:
        return commands.show_status(ctx)

    command = resolve_command(args)
    if command == COMMAND_END:
        return commands.end_session(ctx)

    config = ctx.config_store.load()
    config = commands.apply_settings(
        ctx,
        config,
        color1=args.color1,
        color2=args.color2,
        pomodoro_minutes=args.set_pomodoro,
        break_minutes=args.set_break,
    )

    if args.save_palette is not None:
        commands.save_palette(ctx, args.save_palette, config)
    if args.load_palette is not None:
        exit_code, config = commands.load_palette(ctx, args.load_palette, config)
        if exit_code:
            return exit_code
    if args.delete_palette is not None:
        exit_code = commands.delete_palette(ctx, args.delete_palette)
        if exit_code:
            return exit_code
    if args.list_palettes:
        commands.list_palettes(ctx)

    if command is None:
        return 0

    if command == COMMAND_BREAK:
        mode, minutes = MODE_BREAK, args.break_override or config.break_minutes
    else:
        mode, minutes = MODE_POMODORO, args.pomodoro_override or config.pomodoro_minutes

    runtime = TimerRuntime(
        RuntimeBootstrap(
            timer=CountdownTimer(
                duration_minutes=minutes,
                mode=mode,
                logger=logging.getLogger("pomo.timer"),
            ),
            registry=ctx.registry,
            status=status,
            ticks=TickProcessor(
                TickDependencies(
                    display=TerminalDisplay(ctx.stdout),
                    color1=config.color1,
                    color2=config.color2,
                    logger=logging.getLogger("pomo.runtime"),
                    status=status if args.track else None,
                )
            ),
            alerts=CompletionAlertService(logger=logging.getLogger("pomo.alerts")),
            logger=logging.getLogger("pomo.runtime"),
        )
    )
    return runtime.run()


if __name__ == "__main__":
    sys.exit(main())
