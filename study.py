#!/usr/bin/env python3
"""Hanyu Mate command line: search, save, quiz and review Chinese words.

Usage:
    python study.py search 你好 --add 1
    python study.py list
    python study.py char 好
    python study.py quiz
    python study.py --config ~/.hanyu/-config.json --verbose stats
"""

import argparse
from pathlib import Path
from typing import Callable, List, Optional

from hanyu.app import HanyuApp, CharStatus, ViewState
from hanyu.common.config import CONFIG_FILENAME, load_app_config
from hanyu.common.logging import log_error
from hanyu.common.utils import _load_env_file, split_characters
from hanyu.schema.words import WordCandidate, WordEntry
from hanyu.study.quiz import QuizState


# Load .env on import
_load_env_file()


def _print_word(idx: Optional[int], word, added: bool = False) -> None:
    head = f"{idx}. " if idx is not None else ""
    forms = word.simplified
    if word.traditional and word.traditional != word.simplified:
        forms += f" ({word.traditional})"
    mark = " ✅" if added else ""
    print(f"{head}{forms}  {word.pinyin}  {word.meaning}{mark}")
    if word.example:
        print(f"     {word.example}")
        print(f"     {word.example_meaning}")


def cmd_search(app: HanyuApp, args: argparse.Namespace) -> int:
    results = app.submit_search(args.query)
    if app.state.notice:
        log_error("search", app.state.notice)
        return 1
    if not results:
        print("No results.")
        return 0
    for idx, word in enumerate(results, 1):
        _print_word(idx, word, added=app.is_word_added(word.simplified))
    for pick in args.add or []:
        if not 1 <= pick <= len(results):
            log_error("search", f"No result number {pick}")
            continue
        entry = app.add_result(pick - 1)
        if entry is None:
            print(f"[skip] {results[pick - 1].simplified} is already saved")
        else:
            print(f"[ok] Saved {entry.simplified} ({entry.id})")
    return 0


def cmd_add(app: HanyuApp, args: argparse.Namespace) -> int:
    candidate = WordCandidate(
        simplified=args.simplified.strip(),
        pinyin=args.pinyin,
        meaning=args.meaning,
        example=args.example,
        example_meaning=args.example_meaning,
        traditional=args.traditional,
    )
    if not candidate.simplified:
        log_error("add", "simplified form must not be empty")
        return 2
    entry = app.add_word(candidate)
    if entry is None:
        print(f"[skip] {candidate.simplified} is already saved")
    else:
        print(f"[ok] Saved {entry.simplified} ({entry.id})")
    return 0


def cmd_list(app: HanyuApp, args: argparse.Namespace) -> int:
    app.navigate(ViewState.LIST)
    words = app.words.list()
    print(f"📚 Saved words: {len(words)}")
    for word in words:
        print(f"[{word.id}]")
        _print_word(None, word)
    return 0


def cmd_remove(app: HanyuApp, args: argparse.Namespace) -> int:
    if app.remove_word(args.id):
        print(f"[ok] Removed {args.id}")
    else:
        print(f"[skip] No saved word with id {args.id}")
    return 0


def cmd_char(app: HanyuApp, args: argparse.Namespace) -> int:
    chars = split_characters(args.char)
    if len(chars) != 1:
        log_error("char", f"Expected exactly one Chinese character, got '{args.char}'")
        return 2
    detail = app.open_character(chars[0])
    try:
        if app.state.char_status is CharStatus.UNAVAILABLE or detail is None:
            print(f"{chars[0]}: details unavailable right now.")
            return 1
        print(f"{detail.char}  {detail.pinyin}  {detail.meaning}")
        for rw in detail.related_words:
            print(f"  - {rw.word}  {rw.pinyin}  {rw.meaning}")
        return 0
    finally:
        app.close_character()


def _print_card(word: WordEntry, revealed: bool) -> None:
    print(f"\n    {word.simplified}")
    if revealed:
        print(f"    {word.pinyin}  {word.meaning}")
        if word.example:
            print(f"    {word.example}")
            print(f"    {word.example_meaning}")


def run_quiz(app: HanyuApp, ask: Callable[[str], str] = input) -> int:
    """Interactive quiz loop: Enter reveals, Enter again moves on, q quits."""
    app.navigate(ViewState.QUIZ)
    quiz = app.quiz
    if quiz is None or quiz.empty:
        print("Your word list is empty. Add some words first!")
        return 0
    while True:
        while quiz.state is QuizState.IN_PROGRESS:
            print(f"\n[quiz] {quiz.position + 1} / {quiz.total}")
            _print_card(quiz.current, revealed=False)
            if ask("  [Enter] show answer, [q] quit: ").strip().lower() == "q":
                return 0
            quiz.reveal()
            _print_card(quiz.current, revealed=True)
            if ask("  [Enter] next word, [q] quit: ").strip().lower() == "q":
                return 0
            quiz.advance()
        print(f"\n🏆 Done! Reviewed {quiz.completed_count} word(s).")
        if ask("  Again? [y/N]: ").strip().lower() != "y":
            return 0
        if not quiz.retry():
            print("Your word list is empty. Add some words first!")
            return 0


def cmd_quiz(app: HanyuApp, args: argparse.Namespace) -> int:
    try:
        return run_quiz(app)
    except (EOFError, KeyboardInterrupt):
        print()
        return 0


def cmd_stats(app: HanyuApp, args: argparse.Namespace) -> int:
    app.navigate(ViewState.STATS)
    stats = app.stats()
    print(f"📚 Saved words:  {stats.total_words}")
    print(f"🔥 Study days:   {stats.unique_study_days}")
    recent = stats.most_recent_study_date[5:] if stats.most_recent_study_date else "-"
    print(f"📅 Last studied: {recent}")
    print("\nLast 7 days:")
    for day in stats.daily:
        bar = "█" * day.count
        print(f"  {day.label}  {bar} {day.count}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Personal Chinese vocabulary notebook with AI lookup, quiz and stats"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help=f"Path to {CONFIG_FILENAME} (default: built-in settings)",
    )
    parser.add_argument(
        "--model",
        default=None,
        help="OpenAI model name (overrides config and OPENAI_MODEL)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("search", help="Search words by characters, pinyin or meaning")
    p.add_argument("query")
    p.add_argument("--add", type=int, nargs="+", metavar="N", help="Save result number N (1-based)")
    p.set_defaults(func=cmd_search)

    p = sub.add_parser("add", help="Save a word by hand")
    p.add_argument("simplified")
    p.add_argument("--pinyin", required=True)
    p.add_argument("--meaning", required=True)
    p.add_argument("--example", default="")
    p.add_argument("--example-meaning", default="")
    p.add_argument("--traditional", default=None)
    p.set_defaults(func=cmd_add)

    p = sub.add_parser("list", help="Show saved words, newest first")
    p.set_defaults(func=cmd_list)

    p = sub.add_parser("remove", help="Remove a saved word by id")
    p.add_argument("id")
    p.set_defaults(func=cmd_remove)

    p = sub.add_parser("char", help="Analyze a single character")
    p.add_argument("char")
    p.set_defaults(func=cmd_char)

    p = sub.add_parser("quiz", help="Review up to 10 random saved words")
    p.set_defaults(func=cmd_quiz)

    p = sub.add_parser("stats", help="Show study statistics")
    p.set_defaults(func=cmd_stats)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    config_path = Path(args.config).expanduser() if args.config else None
    if config_path is not None and not config_path.exists():
        log_error("config", f"Config file does not exist: {config_path}")
        return 2

    try:
        config = load_app_config(config_path)
    except ValueError as e:
        log_error("config", str(e))
        return 2

    if args.model:
        config.model = args.model

    app = HanyuApp.from_config(
        config,
        config_folder=config_path.parent if config_path else None,
        verbose=args.verbose,
        debug=args.debug,
    )
    return args.func(app, args)


if __name__ == "__main__":
    raise SystemExit(main())
