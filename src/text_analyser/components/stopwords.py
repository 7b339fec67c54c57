"""
Наборы стоп-слов: предлоги, союзы, местоимения и частицы.
"""

from typing import FrozenSet, Iterable

RUSSIAN_STOPWORDS: FrozenSet[str] = frozenset({
    # Предлоги
    'в', 'во', 'на', 'с', 'со', 'к', 'ко', 'по', 'о', 'об', 'обо', 'от', 'ото',
    'до', 'из', 'изо', 'за', 'под', 'подо', 'над', 'надо', 'при', 'про', 'для',
    'без', 'безо', 'через', 'перед', 'между', 'около', 'после', 'у', 'вокруг',
    'среди', 'против', 'ради', 'кроме', 'вместо',
    # Союзы
    'и', 'а', 'но', 'или', 'либо', 'да', 'что', 'чтобы', 'как', 'если', 'когда',
    'потому', 'поэтому', 'так', 'также', 'тоже', 'однако', 'хотя', 'пока',
    'ни', 'то', 'зато', 'будто', 'словно', 'чем', 'тем',
    # Местоимения
    'я', 'ты', 'он', 'она', 'оно', 'мы', 'вы', 'они', 'меня', 'тебя', 'его',
    'её', 'ее', 'нас', 'вас', 'их', 'мне', 'тебе', 'ему', 'ей', 'нам', 'вам',
    'им', 'мной', 'тобой', 'ним', 'ней', 'нами', 'вами', 'ими', 'нем', 'нём',
    'них', 'себя', 'себе', 'собой', 'свой', 'своя', 'своё', 'свое', 'свои',
    'мой', 'моя', 'моё', 'мое', 'мои', 'твой', 'твоя', 'наш', 'наша', 'ваш',
    'ваша', 'этот', 'эта', 'это', 'эти', 'этого', 'этой', 'этим', 'этом',
    'тот', 'та', 'те', 'того', 'той', 'том', 'кто', 'который', 'которая',
    'которое', 'которые', 'которого', 'которой', 'весь', 'вся', 'всё', 'все',
    'всех', 'всем', 'сам', 'сама', 'само', 'сами', 'такой', 'такая', 'такое',
    'такие', 'каждый', 'любой', 'какой', 'какая', 'какое', 'какие', 'чей',
    # Частицы
    'не', 'же', 'ли', 'бы', 'б', 'ведь', 'вот', 'вон', 'даже', 'лишь', 'только',
    'уже', 'ещё', 'еще', 'ну', 'разве', 'неужели', 'пусть', 'именно', 'почти',
    # Наречия, часто открывающие предложение
    'потом', 'затем', 'тогда', 'здесь', 'там', 'сейчас', 'теперь',
    # Связки
    'был', 'была', 'было', 'были', 'быть', 'есть',
})

ENGLISH_STOPWORDS: FrozenSet[str] = frozenset({
    # Prepositions
    'a', 'an', 'the', 'of', 'in', 'on', 'at', 'to', 'for', 'from', 'by', 'with',
    'about', 'into', 'over', 'under', 'between', 'within', 'without', 'through',
    'after', 'before', 'during', 'against', 'among', 'upon', 'via',
    # Conjunctions
    'and', 'or', 'but', 'nor', 'so', 'yet', 'if', 'than', 'that', 'because',
    'while', 'as', 'when', 'whether', 'though', 'although',
    # Pronouns
    'i', 'me', 'my', 'we', 'us', 'our', 'you', 'your', 'he', 'him', 'his',
    'she', 'her', 'it', 'its', 'they', 'them', 'their', 'this', 'these',
    'those', 'who', 'whom', 'whose', 'which', 'what', 'each', 'all', 'any',
    # Particles and auxiliaries
    'not', 'no', 'also', 'too', 'only', 'just', 'is', 'are', 'was', 'were',
    'be', 'been', 'being', 'am', 'do', 'does', 'did', 'has', 'have', 'had',
    # Sentence-opening adverbs
    'then', 'there', 'here', 'now',
})

STOPWORDS_BY_LANGUAGE = {
    'ru': RUSSIAN_STOPWORDS,
    'en': ENGLISH_STOPWORDS,
}


def get_stopwords(languages: Iterable[str] = ('ru', 'en')) -> FrozenSet[str]:
    """
    Объединяет стоп-слова для указанных языков.

    Args:
        languages: Коды языков ('ru', 'en')

    Returns:
        Множество стоп-слов в нижнем регистре
    """
    words = set()
    for lang in languages:
        if lang not in STOPWORDS_BY_LANGUAGE:
            raise ValueError(f"Нет списка стоп-слов для языка: {lang}")
        words |= STOPWORDS_BY_LANGUAGE[lang]
    return frozenset(words)
