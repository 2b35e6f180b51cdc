#!/usr/bin/env python
"""CLI for the news quiz."""

from news_quiz.cli import main

if __name__ == "__main__":
    main()
