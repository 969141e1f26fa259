from dataclasses import dataclass

from trailio.utils.parsing import split_language


@dataclass(frozen=True)
class LanguagePhrases:
    trailer_label: str
    making_label: str
    ending_label: str
    trailer_words: tuple
    making_query: str
    ending_query: str
    making_phrases: tuple
    behind_scenes_phrases: tuple
    interview_phrases: tuple
    ending_phrases: tuple

    def label(self, category: str):
        return {
            "trailer": self.trailer_label,
            "making": self.making_label,
            "ending": self.ending_label,
        }[category]

    def query_suffix(self, category: str):
        return self.making_query if category == "making" else self.ending_query


ENGLISH = LanguagePhrases(
    trailer_label="🎬 Trailer",
    making_label="🎥 Making of",
    ending_label="🧩 Ending explained",
    trailer_words=("trailer",),
    making_query="making of behind the scenes",
    ending_query="ending explained",
    making_phrases=("making of",),
    behind_scenes_phrases=("behind the scenes",),
    interview_phrases=("interview",),
    ending_phrases=("ending explained",),
)

SPANISH = LanguagePhrases(
    trailer_label="🎬 Tráiler",
    making_label="🎥 Cómo se hizo",
    ending_label="🧩 Final explicado",
    trailer_words=("tráiler", "trailer"),
    making_query="making of detrás de cámaras",
    ending_query="final explicado",
    making_phrases=("making of", "cómo se hizo"),
    behind_scenes_phrases=("detrás de cámaras", "detrás de escena"),
    interview_phrases=("entrevista",),
    ending_phrases=("final explicado", "explicación del final"),
)

PHRASES = {
    "en": ENGLISH,
    "es": SPANISH,
}


def get_phrases(language: str):
    lang, _ = split_language(language)
    return PHRASES.get(lang, ENGLISH)


def is_english(language: str):
    lang, _ = split_language(language)
    return lang == "en"


LANGUAGE_NAMES = {
    "en": ("english",),
    "es": ("español", "castellano"),
    "fr": ("français", "francais"),
    "de": ("deutsch",),
    "it": ("italiano",),
    "pt": ("português", "portugues"),
}


def language_words(language: str):
    lang, _ = split_language(language)
    return LANGUAGE_NAMES.get(lang, ())
