"""交互式信号记录外壳：粘贴扫描结果并查看当前星系的信号。"""

from __future__ import annotations

import argparse
from pathlib import Path

from cosmic_signatures.config import ConfigError, load_config
from cosmic_signatures.core.clipboard import ClipboardUnavailable, read_clipboard
from cosmic_signatures.core.session import SessionState
from cosmic_signatures.logging_utils import get_logger, setup_logging
from cosmic_signatures.reference.catalogue import ReferenceDataError, load_reference_data

HELP_TEXT = "命令：p 粘贴 | s <星系> 切换星系 | j/k 移动光标 | d 删除选中 | q 退出"


def render(session: SessionState) -> None:
    if session.current_system is None:
        print("未选择星系。")
        return
    header = session.current_system
    info = session.system_info()
    if info is not None:
        header += f"  [{info.classification().label}]"
        if info.effect:
            header += f"  {info.effect}"
        if info.statics:
            header += f"  静态：{', '.join(info.statics)}"
    print(header)
    signatures = session.active_signatures()
    if not signatures:
        print("  （暂无信号）")
        return
    for index, signature in enumerate(signatures):
        marker = ">" if index == session.cursor else " "
        print(f"{marker} " + "  ".join(f"{cell:<12}" for cell in signature.to_row()).rstrip())


def main() -> None:
    parser = argparse.ArgumentParser(description="宇宙信号记录")
    parser.add_argument("--config", help="config.toml 路径")
    parser.add_argument("--system", help="启动时选中的星系")
    parser.add_argument("--file", help="从文件读取粘贴内容而不是剪贴板")
    args = parser.parse_args()

    try:
        config = load_config(args.config)
        reference = load_reference_data(config.wormhole_types_path, config.systems_path)
    except (ConfigError, FileNotFoundError, ReferenceDataError) as exc:
        raise SystemExit(f"启动失败：{exc}") from exc
    setup_logging(config)
    logger = get_logger("cosmic_signatures.shell")
    logger.info("启动")

    session = SessionState(reference=reference, identifier_width=config.identifier_width)
    initial_system = args.system or config.initial_system
    if initial_system:
        session.select_system(initial_system)

    print(HELP_TEXT)
    while True:
        render(session)
        try:
            command = input("> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break
        if command == "q":
            break
        if command == "p":
            try:
                text = Path(args.file).read_text(encoding="utf-8") if args.file else read_clipboard()
            except (OSError, ClipboardUnavailable) as exc:
                print(f"读取失败：{exc}")
                continue
            count = session.paste(text)
            logger.info("粘贴 %d 条候选记录到 %s", count, session.current_system)
        elif command.startswith("s "):
            session.select_system(command[2:].strip())
        elif command == "j":
            session.cursor_down()
        elif command == "k":
            session.cursor_up()
        elif command == "d":
            removed = session.remove_selected()
            if removed is not None:
                logger.info("删除信号 %s", removed.identifier)
        else:
            print(HELP_TEXT)
    logger.info("退出")


if __name__ == "__main__":
    main()
