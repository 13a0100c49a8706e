"""Demo trends and insights for an empty TrendAnalyzer store."""

from __future__ import annotations

from protokit.backend.sites.trendanalyzer.storage import TrendAnalyzerStorage

# (title, category, searches, growth, countries, summary, prediction)
TRENDS = [
    ("AI coding assistant", "viral", 1_200_000, "+342%", 15,
     "Trending due to major tech companies announcing new AI-powered coding tools. Expected to grow "
     "as developers adopt these technologies for faster development cycles.", "will_grow"),
    ("Climate summit 2024", "news", 890_000, "+189%", 23,
     "Major announcements from global leaders at the annual climate summit driving widespread public "
     "interest and policy discussions across multiple nations.", "will_stabilize"),
    ("World Cup qualifiers", "sports", 2_100_000, "+278%", 31,
     "Critical qualification matches determining which teams advance to the next World Cup. "
     "High-stakes games generating massive global viewership and engagement.", "will_grow"),
    ("Bitcoin ETF approval", "finance", 756_000, "-23%", 18,
     "Regulatory developments around cryptocurrency ETFs creating market volatility. Institutional "
     "investors closely monitoring approval status and market implications.", "will_fade"),
    ("New Marvel movie trailer", "culture", 1_800_000, "+156%", 27,
     "Highly anticipated superhero movie trailer release generating massive social media engagement "
     "and fan theories across platforms worldwide.", "will_grow"),
]

# (type, title, description, status)
INSIGHTS = [
    ("prediction", "AI coding tools", "Will grow", "will_grow"),
    ("prediction", "Climate summit", "Will stabilize", "will_stabilize"),
    ("content_opportunity", "AI Development Tutorials", "High demand for coding assistant guides", "will_grow"),
    ("content_opportunity", "Climate Action Plans", "Sustainability content trending", "will_grow"),
]


def seed(storage: TrendAnalyzerStorage) -> None:
    for title, category, searches, growth, countries, summary, prediction in TRENDS:
        storage.trends.insert({
            "title": title, "category": category, "searches": searches, "growth": growth,
            "countries": countries, "ai_summary": summary, "prediction": prediction,
        })
    for kind, title, description, status in INSIGHTS:
        storage.ai_insights.insert({"type": kind, "title": title, "description": description, "status": status})
