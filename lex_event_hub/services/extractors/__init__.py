from lex_event_hub.services.extractors.base import BaseExtractor, ExtractorError, FetchError, ParseError
from lex_event_hub.services.extractors.farmers_market_service import FarmersMarketExtractor
from lex_event_hub.services.extractors.church_service import ChurchExtractor
from lex_event_hub.services.extractors.community_service import CommunityExtractor
from lex_event_hub.services.extractors.zoo_service import ZooExtractor
from lex_event_hub.services.extractors.museum_service import MuseumExtractor
from lex_event_hub.services.extractors.festival_service import FestivalExtractor
from lex_event_hub.services.extractors.volunteer_service import VolunteerExtractor
from lex_event_hub.services.extractors.classes_service import ClassesExtractor


def default_extractors() -> list[BaseExtractor]:
    """All sources, in concatenation order (earlier wins on duplicates)."""
    return [
        FarmersMarketExtractor(),
        ChurchExtractor(),
        CommunityExtractor(),
        ZooExtractor(),
        MuseumExtractor(),
        FestivalExtractor(),
        VolunteerExtractor(),
        ClassesExtractor(),
    ]
