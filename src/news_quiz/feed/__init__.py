from news_quiz.feed.session import FeedEvent, FeedSession, filter_for_tab, join_answers

__all__ = [
    "FeedEvent",
    "FeedSession",
    "filter_for_tab",
    "join_answers",
]
