"""
Классификатор имён собственных по категориям.

Правила проверяются по порядку: software, organization, location, person.
Первое сработавшее правило определяет категорию, иначе unknown.
Таблицу можно заменить или расширить, передав свой список правил.
"""

import re
import unicodedata
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple
from ..interfaces.text_processor import ProperNounCategory


@dataclass(frozen=True)
class ProperNounCandidate:
    """Кандидат в имена собственные с ближайшим контекстом."""
    name: str
    words: Tuple[str, ...]
    preceding_word: Optional[str] = None

    @property
    def lower_words(self) -> Tuple[str, ...]:
        return tuple(unicodedata.normalize('NFC', w).lower() for w in self.words)


@dataclass(frozen=True)
class ClassificationRule:
    """Правило вида предикат → категория."""
    name: str
    category: ProperNounCategory
    predicate: Callable[[ProperNounCandidate], bool]

    def __call__(self, candidate: ProperNounCandidate) -> bool:
        return self.predicate(candidate)


def _stem_match(word: str, stems: Sequence[str], max_suffix: int = 2) -> bool:
    """Слово начинается с основы и отличается от неё не более чем окончанием."""
    return any(word.startswith(stem) and len(word) - len(stem) <= max_suffix for stem in stems)


# --- Программные продукты ---
KNOWN_SOFTWARE = frozenset({
    'python', 'java', 'javascript', 'typescript', 'windows', 'linux', 'ubuntu',
    'debian', 'android', 'ios', 'macos', 'excel', 'photoshop', 'docker',
    'kubernetes', 'postgresql', 'mysql', 'sqlite', 'mongodb', 'oracle',
    'git', 'github', 'gitlab', 'chrome', 'firefox', 'telegram', 'skype',
    'matlab', 'tensorflow', 'pytorch', 'django', 'react', 'angular', 'nginx',
    'apache', 'word', 'powerpoint', 'outlook', 'autocad', 'unix',
    '1с', 'битрикс', 'линукс', 'виндовс', 'андроид', 'питон',
})
SOFTWARE_SUFFIXES = ('db', 'sql', 'script')
_CAMEL_CASE = re.compile(r'^[A-ZА-ЯЁ]?[a-zа-яё]+[A-ZА-ЯЁ][A-Za-zА-Яа-яЁё]*$')
_VERSIONED = re.compile(r'^[^\W\d_]+\d+$')


def _is_software(c: ProperNounCandidate) -> bool:
    words = c.lower_words
    if any(w in KNOWN_SOFTWARE for w in words):
        return True
    if any(_VERSIONED.match(w) for w in c.words):
        return True
    # JavaScript, PostgreSQL, GitHub
    if any(_CAMEL_CASE.match(w) for w in c.words):
        return True
    last = words[-1]
    return len(last) > 4 and last.endswith(SOFTWARE_SUFFIXES) and last.isascii()


# --- Организации ---
KNOWN_ORGANIZATIONS = frozenset({
    'яндекс', 'google', 'microsoft', 'apple', 'amazon', 'ibm', 'intel',
    'сбербанк', 'газпром', 'роскосмос', 'росатом', 'аэрофлот', 'лукойл',
    'nasa', 'unesco', 'юнеско', 'ооо', 'оао', 'зао', 'пао', 'мгу', 'спбгу',
    'samsung', 'facebook', 'meta', 'openai', 'nvidia', 'huawei', 'касперский',
})
ORGANIZATION_KEYWORDS = (
    'университет', 'институт', 'академи', 'компани', 'корпораци', 'банк',
    'министерств', 'агентств', 'фонд', 'комитет', 'ассоциаци', 'организаци',
    'общество', 'служб', 'центр', 'лаборатори', 'завод', 'холдинг', 'союз',
)
ORGANIZATION_SUFFIXES = frozenset({
    'inc', 'ltd', 'llc', 'corp', 'corporation', 'company', 'co', 'gmbh', 'ag',
    'university', 'institute', 'foundation', 'agency', 'association',
    'administration', 'organization', 'organisation', 'bank', 'group', 'labs',
    'society', 'committee',
})


def _is_organization(c: ProperNounCandidate) -> bool:
    words = c.lower_words
    if any(w in KNOWN_ORGANIZATIONS for w in words):
        return True
    if any(w in ORGANIZATION_SUFFIXES for w in words):
        return True
    if any(any(w.startswith(k) for k in ORGANIZATION_KEYWORDS) for w in words):
        return True
    # Аббревиатура из трёх и более заглавных букв: ООН, NASA
    return len(c.words) == 1 and len(c.name) >= 3 and c.name.isupper()


# --- Топонимы ---
KNOWN_LOCATION_STEMS = (
    'москв', 'петербург', 'санкт', 'росси', 'казан', 'новосибирск', 'екатеринбург',
    'европ', 'америк', 'ази', 'африк', 'кита', 'япони', 'германи', 'франци',
    'англи', 'итали', 'испани', 'сибир', 'урал', 'волг', 'лондон', 'париж',
    'берлин', 'рим', 'токи', 'пекин', 'киев', 'минск', 'сша', 'украин', 'индии',
)
KNOWN_LOCATIONS_EN = frozenset({
    'moscow', 'russia', 'london', 'paris', 'berlin', 'rome', 'tokyo', 'beijing',
    'europe', 'america', 'asia', 'africa', 'china', 'japan', 'germany', 'france',
    'england', 'italy', 'spain', 'usa', 'california', 'texas', 'york', 'washington',
})
LOCATION_KEYWORDS = frozenset({
    'город', 'река', 'озеро', 'гора', 'область', 'край', 'республика', 'улица',
    'city', 'river', 'lake', 'mount', 'street', 'island', 'county', 'state',
})
LOCATION_SUFFIXES = ('град', 'бург', 'поль', 'ск', 'ска', 'ске', 'ску', 'ville', 'land', 'burg')
LOCATIVE_PREPOSITIONS = frozenset({'в', 'во', 'из', 'near', 'in'})


def _is_location(c: ProperNounCandidate) -> bool:
    words = c.lower_words
    if any(_stem_match(w, KNOWN_LOCATION_STEMS) for w in words):
        return True
    if any(w in KNOWN_LOCATIONS_EN or w in LOCATION_KEYWORDS for w in words):
        return True
    if len(words) == 1 and words[0].endswith(LOCATION_SUFFIXES) and len(words[0]) > 4:
        return True
    # «в Москву», «из Берлина»: однословное имя после предлога места
    return len(words) == 1 and (c.preceding_word or '').lower() in LOCATIVE_PREPOSITIONS


# --- Персоналии ---
GIVEN_NAME_STEMS = (
    'иван', 'петр', 'пётр', 'алексе', 'александр', 'серге', 'андре', 'дмитри',
    'михаил', 'никола', 'владимир', 'павел', 'павл', 'юри', 'борис', 'игор',
    'ольг', 'анн', 'мари', 'елен', 'наталь', 'татьян', 'екатерин', 'ирин',
    'светлан', 'юли', 'антон', 'максим', 'фёдор', 'федор', 'лев', 'льв',
)
GIVEN_NAMES_EN = frozenset({
    'john', 'mary', 'james', 'michael', 'david', 'sarah', 'anna', 'peter',
    'william', 'elizabeth', 'robert', 'thomas', 'george', 'alan', 'linus',
    'richard', 'charles', 'donald', 'ada', 'grace', 'steve', 'bill', 'mark',
})
PERSON_TITLES = frozenset({'mr', 'mrs', 'ms', 'dr', 'prof', 'господин', 'госпожа', 'профессор', 'доктор', 'академик'})
PATRONYMIC_SUFFIXES = ('вич', 'вна', 'чна', 'вича', 'вны', 'вичу', 'вне')
SURNAME_SUFFIXES = ('ов', 'ев', 'ёв', 'ин', 'ын', 'ова', 'ева', 'ина', 'ский', 'ская', 'цкий', 'цкая', 'ых', 'их')


def _is_person(c: ProperNounCandidate) -> bool:
    words = c.lower_words
    if _stem_match(words[0], GIVEN_NAME_STEMS) or words[0] in GIVEN_NAMES_EN:
        return True
    if (c.preceding_word or '').lower() in PERSON_TITLES or words[0] in PERSON_TITLES:
        return True
    if any(w.endswith(PATRONYMIC_SUFFIXES) for w in words):
        return True
    # Имя + фамилия: последнее слово с типичным окончанием фамилии
    return len(words) >= 2 and words[-1].endswith(SURNAME_SUFFIXES)


DEFAULT_RULES: List[ClassificationRule] = [
    ClassificationRule('software', ProperNounCategory.SOFTWARE, _is_software),
    ClassificationRule('organization', ProperNounCategory.ORGANIZATION, _is_organization),
    ClassificationRule('location', ProperNounCategory.LOCATION, _is_location),
    ClassificationRule('person', ProperNounCategory.PERSON, _is_person),
]


class ProperNounClassifier:
    """Классификатор по упорядоченной таблице правил."""

    def __init__(self, rules: Optional[Sequence[ClassificationRule]] = None):
        self.rules: List[ClassificationRule] = list(DEFAULT_RULES if rules is None else rules)

    def classify(self, candidate: ProperNounCandidate) -> ProperNounCategory:
        """
        Определяет категорию кандидата.

        Args:
            candidate: Кандидат в имена собственные

        Returns:
            Категория первого сработавшего правила или UNKNOWN
        """
        for rule in self.rules:
            if rule(candidate):
                return rule.category
        return ProperNounCategory.UNKNOWN

    def with_rule(self, rule: ClassificationRule, position: Optional[int] = None) -> 'ProperNounClassifier':
        """Возвращает новый классификатор с дополнительным правилом."""
        rules = list(self.rules)
        rules.insert(len(rules) if position is None else position, rule)
        return ProperNounClassifier(rules)
