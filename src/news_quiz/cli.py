"""Terminal front-end for the news quiz."""

import argparse
import asyncio
import logging
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, field_validator

from news_quiz.config import (
    App,
    NewsQuizConfig,
    create_from_config,
    get_default_config_path,
    load_config,
)
from news_quiz.data import AnsweredArticle, FeedTab, Language
from news_quiz.errors import FetchError
from news_quiz.feed import FeedSession
from news_quiz.state import bind_localizer

logger = logging.getLogger(__name__)

MESSAGES: dict[Language, dict[str, str]] = {
    Language.EN: {
        "prompt": "[f]ake / [r]eal / [n]ext / [t]ab / [q]uit > ",
        "correct": "Correct!",
        "incorrect": "Wrong.",
        "was_fake": "This article was fabricated.",
        "was_real": "This article was genuine.",
        "answered": "Already answered",
        "score": "Score: {score}  Streak: {streak}",
        "end": "No more articles.",
        "tab": "Tab: {tab}",
        "load_failed": "Could not load articles (status {status}). Try again later.",
    },
    Language.FR: {
        "prompt": "[f]aux / [r]éel / [n]suivant / [t]onglet / [q]uitter > ",
        "correct": "Bonne réponse !",
        "incorrect": "Mauvaise réponse.",
        "was_fake": "Cet article était inventé.",
        "was_real": "Cet article était authentique.",
        "answered": "Déjà répondu",
        "score": "Score : {score}  Série : {streak}",
        "end": "Plus d'articles.",
        "tab": "Onglet : {tab}",
        "load_failed": "Impossible de charger les articles (code {status}). Réessayez plus tard.",
    },
}


class ConsoleLocalizer:
    """Looks up terminal messages in the active language."""

    def __init__(self, language: Language = Language.EN) -> None:
        self.language = language

    def change_language(self, language: Language) -> None:
        logger.debug(f"Switching messages to {language}")
        self.language = Language(language)

    def t(self, key: str, **kwargs: object) -> str:
        return MESSAGES[self.language][key].format(**kwargs)


class CLIArgs(BaseModel):
    """Validated CLI arguments."""

    command: Literal["play", "score", "reset", "language"]
    config: Path
    verbose: bool = False
    tab: FeedTab = FeedTab.LATEST
    score_only: bool = False
    language: Language | None = None

    @field_validator("config")
    @classmethod
    def config_must_exist(cls, v: Path) -> Path:
        if not v.exists():
            raise ValueError(f"Config file not found: {v}")
        return v


def render_article(item: AnsweredArticle, localizer: ConsoleLocalizer) -> str:
    article = item.article
    lines = [
        "",
        f"[{article.category}] {article.created_at:%Y-%m-%d %H:%M}",
        article.headline,
        "",
        article.body,
    ]
    if item.answered is not None:
        verdict = localizer.t("correct" if item.answered.was_correct else "incorrect")
        lines.append(f"\n({localizer.t('answered')}: {verdict})")
    return "\n".join(lines)


async def play(
    app: App,
    localizer: ConsoleLocalizer,
    *,
    tab: FeedTab = FeedTab.LATEST,
    reader: Callable[[str], str] = input,
) -> int:
    """Run the interactive quiz until the reader quits or the feed ends."""
    session: FeedSession = app.session
    session.set_tab(tab)
    try:
        await session.load()
    except FetchError as e:
        print(localizer.t("load_failed", status=e.status))
        return 1

    while True:
        current = session.current_article
        if current is None:
            print(localizer.t("end"))
            return 0

        print(render_article(current, localizer))
        try:
            command = (await asyncio.to_thread(reader, localizer.t("prompt"))).strip().lower()
        except EOFError:
            return 0

        if command in ("f", "r"):
            answer = await session.submit_answer(selected_as_fabricated=command == "f")
            if answer is None:
                continue
            print(localizer.t("correct" if answer.was_correct else "incorrect"))
            print(localizer.t("was_fake" if current.article.is_fabricated else "was_real"))
            if current.article.fabrication_reason:
                print(current.article.fabrication_reason)
            print(localizer.t("score", score=session.score.score, streak=session.score.streak))
        elif command == "n":
            if not await _advance(session):
                print(localizer.t("end"))
                return 0
        elif command == "t":
            next_tab = FeedTab.TO_READ if session.active_tab == FeedTab.LATEST else FeedTab.LATEST
            session.set_tab(next_tab)
            print(localizer.t("tab", tab=next_tab))
        elif command == "q":
            return 0


async def _advance(session: FeedSession) -> bool:
    """Move to the next article, fetching another page at the end of the list."""
    if session.next_article():
        return True
    try:
        loaded = await session.load_more()
    except FetchError as e:
        logger.warning(f"Failed to load more articles. Error: {e}")
        return False
    return loaded and session.next_article()


async def run(args: CLIArgs, config: NewsQuizConfig | None = None) -> int:
    """Execute one CLI command.

    Args:
        args: Validated CLI arguments.
        config: Preloaded configuration (loaded from ``args.config`` otherwise).

    Returns:
        Process exit code.
    """
    config = config or load_config(args.config)
    app = create_from_config(config)
    await app.start()

    localizer = ConsoleLocalizer()
    bind_localizer(app.settings_store, localizer)

    if args.command == "play":
        return await play(app, localizer, tab=args.tab)

    if args.command == "score":
        score = app.news_store.score
        print(localizer.t("score", score=score.score, streak=score.streak))
        print(f"Answered: {len(app.news_store.answers)}")
        return 0

    if args.command == "reset":
        if args.score_only:
            await app.news_store.reset_score()
        else:
            await app.news_store.reset_all()
        score = app.news_store.score
        print(localizer.t("score", score=score.score, streak=score.streak))
        return 0

    if args.language is not None:
        await app.settings_store.set_language(args.language)
    print(app.settings_store.language)
    return 0


def main() -> None:
    """Entry point for the CLI."""
    parser = argparse.ArgumentParser(description="Tell genuine news from fabricated news.")
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="Path to YAML config file (default: configs/default.yaml)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        default=False,
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    play_parser = subparsers.add_parser("play", help="Answer articles from the feed")
    play_parser.add_argument(
        "--tab",
        choices=[t.value for t in FeedTab],
        default=FeedTab.LATEST.value,
        help="Tab to start on (default: latest)",
    )

    subparsers.add_parser("score", help="Show score and streak")

    reset_parser = subparsers.add_parser("reset", help="Reset answers and score")
    reset_parser.add_argument(
        "--score-only",
        action="store_true",
        default=False,
        help="Zero the score but keep recorded answers",
    )

    language_parser = subparsers.add_parser("language", help="Show or set the language")
    language_parser.add_argument(
        "language",
        nargs="?",
        choices=[lang.value for lang in Language],
        help="New language",
    )

    ns = parser.parse_args()
    config_path: Path = ns.config if ns.config else get_default_config_path()

    try:
        args = CLIArgs(
            command=ns.command,
            config=config_path,
            verbose=ns.verbose,
            tab=getattr(ns, "tab", FeedTab.LATEST),
            score_only=getattr(ns, "score_only", False),
            language=getattr(ns, "language", None),
        )
        config = load_config(args.config)
    except Exception as e:
        logging.basicConfig(level=logging.INFO, format="%(message)s")
        logger.error(str(e))
        sys.exit(1)

    level = logging.DEBUG if args.verbose else getattr(logging, config.logging.level)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    try:
        sys.exit(asyncio.run(run(args, config)))
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    main()
