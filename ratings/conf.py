from django.conf import settings

from ratings.stars import DEFAULT_MAX_STARS

# Upper bound for caller-supplied scales, e.g. ?max_stars= on the stars API
DEFAULT_MAX_STARS_LIMIT = 20


def get_max_stars():
    """Site-wide rating scale, from settings.STAR_RATING_MAX_STARS"""
    return getattr(settings, 'STAR_RATING_MAX_STARS', DEFAULT_MAX_STARS)


def get_max_stars_limit():
    return getattr(settings, 'STAR_RATING_MAX_STARS_LIMIT', DEFAULT_MAX_STARS_LIMIT)
