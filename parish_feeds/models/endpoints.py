from __future__ import annotations

from dataclasses import dataclass, fields


@dataclass(slots=True)
class Endpoints:
    """Base URLs and fixed identifiers of every remote feed."""

    news_url: str = "http://www.trinityeaston.org/"
    blog_url: str = "http://trinityeaston.blogspot.com/feeds/posts/default"
    social_url: str = "http://api.twitter.com/1/statuses/user_timeline"
    social_screen_name: str = "trinityeastonpa"
    page_url: str = "http://www.facebook.com/feeds/page.php"
    page_id: str = "99634166137"
    calendar_url: str = "http://www.mychurchevents.com/Calendar/RSS.ashx"
    calendar_id: str = "L6M7G1G1L6H2G1G1"
    service_times_url: str = "http://www.trinityeaston.org/trinjal/data/servicetimes.xml"

    @classmethod
    def field_names(cls) -> set[str]:
        return {f.name for f in fields(cls)}

    @classmethod
    def url_field_names(cls) -> set[str]:
        return {name for name in cls.field_names() if name.endswith("_url")}
