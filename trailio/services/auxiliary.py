from trailio.core.logger import logger
from trailio.core.models import ScoringWeights
from trailio.metadata.models import VideoCandidate, VideoReference
from trailio.search.serpapi import SerpApiSearch
from trailio.services.localization import (
    ENGLISH,
    LanguagePhrases,
    get_phrases,
    is_english,
    language_words,
)
from trailio.services.trailers import is_recognized_site
from trailio.utils.formatting import clean_video_title


def _contains_any(text: str, phrases: tuple):
    return any(phrase in text for phrase in phrases)


def build_query(title: str, year: str, language: str, category: str):
    parts = [title]
    if year:
        parts.append(year)
    parts.append(get_phrases(language).query_suffix(category))
    return " ".join(parts)


def score_candidate(
    candidate: VideoCandidate,
    title: str,
    language: str,
    category: str,
    weights: ScoringWeights,
):
    phrases: LanguagePhrases = get_phrases(language)
    candidate_title = candidate.title.lower()
    text = f"{candidate_title} {candidate.description.lower()}"
    duration = candidate.duration

    score = 0
    if title and title.lower() in candidate_title:
        score += weights.title_match

    if category == "ending":
        if _contains_any(text, phrases.ending_phrases):
            score += weights.ending_phrase
        if duration >= weights.ending_long_seconds:
            score += weights.ending_long_duration
        if duration < weights.ending_short_seconds:
            score += weights.ending_short_penalty
    elif category == "making":
        if _contains_any(text, phrases.making_phrases + ENGLISH.making_phrases):
            score += weights.making_phrase
        if _contains_any(text, phrases.behind_scenes_phrases + ENGLISH.behind_scenes_phrases):
            score += weights.behind_scenes_phrase
        if _contains_any(text, phrases.interview_phrases + ENGLISH.interview_phrases):
            score += weights.interview_phrase
        if duration >= weights.making_long_seconds:
            score += weights.making_long_duration
        if duration < weights.making_short_seconds:
            score += weights.making_short_penalty

    if _contains_any(text, language_words(language)):
        score += weights.language_match

    if not is_english(language) and "english" in text:
        score += weights.english_mismatch_penalty

    if _contains_any(text, phrases.trailer_words + ENGLISH.trailer_words):
        score += weights.trailer_penalty

    return score


def pick_best(
    candidates: list[VideoCandidate],
    title: str,
    language: str,
    category: str,
    weights: ScoringWeights,
):
    best = None
    best_score = None
    for candidate in candidates:
        if not is_recognized_site(candidate):
            continue

        score = score_candidate(candidate, title, language, category, weights)
        if best_score is None or score > best_score:
            best, best_score = candidate, score

    if best is None or best_score <= weights.min_score:
        return None, best_score

    return best, best_score


class AuxiliarySelector:
    def __init__(self, search: SerpApiSearch, weights: ScoringWeights):
        self.search = search
        self.weights = weights

    async def select(self, title: str, year: str, language: str, category: str):
        query = build_query(title, year, language, category)
        candidates = await self.search.search_videos(query, language)

        best, best_score = pick_best(
            candidates, title, language, category, self.weights
        )
        if best is None:
            logger.log(
                "SEARCH",
                f"No {category} video for '{title}' (best score: {best_score})",
            )
            return None

        logger.log(
            "SEARCH", f"{category} video {best.key} for '{title}' scored {best_score}"
        )
        return VideoReference(
            category=category, key=best.key, title=clean_video_title(best.title)
        )
