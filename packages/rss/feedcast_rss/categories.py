"""
iTunes podcast categories.

A static table of the categories Apple Podcasts understands. Each row maps a
symbolic name to a one or two level path. Names are stored exactly as they
must appear in the feed, HTML entities included (``Fashion &amp; Beauty``).

The legacy Apple list comes first, followed by the rows introduced when Apple
revised its categories in 2019. Near-duplicates across the two lists
(``Sports &amp; Recreation`` and ``Sports``) are distinct rows.

See https://help.apple.com/itc/podcasts_connect/#/itc9267a2f12
"""

from dataclasses import dataclass
from typing import Any

CSV_SEPARATOR = ","
DISPLAY_SEPARATOR = " → "


@dataclass(frozen=True)
class ItunesPodcastCategory:
    """A category row: symbolic name plus its hierarchical path."""

    name: str
    path: tuple[str, ...]

    @property
    def categories(self) -> list[str]:
        """Path as a list, ready for ``RssChannel.category``."""
        return list(self.path)

    @property
    def display_name(self) -> str:
        return DISPLAY_SEPARATOR.join(self.path)

    def to_csv(self) -> str:
        """Path joined with commas, the form ``category_by`` matches on."""
        return CSV_SEPARATOR.join(self.path)

    def to_dict(self) -> dict[str, Any]:
        return {"value": self.to_csv(), "name": self.display_name}


def _row(name: str, *path: str) -> ItunesPodcastCategory:
    return ItunesPodcastCategory(name, path)


ITUNES_PODCAST_CATEGORIES: tuple[ItunesPodcastCategory, ...] = (
    _row("ARTS", "Arts"),
    _row("ARTS_DESIGN", "Arts", "Design"),
    _row("ARTS_FASHION_AND_BEAUTY", "Arts", "Fashion &amp; Beauty"),
    _row("ARTS_FOOD", "Arts", "Fashion &amp; Food"),
    _row("ARTS_LITERATURE", "Arts", "Literature"),
    _row("ARTS_PERFORMING_ARTS", "Arts", "Performing Arts"),
    _row("ARTS_VISUAL_ARTS", "Arts", "Visual Arts"),
    _row("BUSINESS", "Business"),
    _row("BUSINESS_BUSINESS_NEWS", "Business", "Business News"),
    _row("BUSINESS_CAREERS", "Business", "Careers"),
    _row("BUSINESS_INVESTING", "Business", "Investing"),
    _row("BUSINESS_MANAGEMENT_AND_MARKETING", "Business", "Management &amp; Marketing"),
    _row("BUSINESS_SHOPPING", "Business", "Shopping"),
    _row("COMEDY", "Comedy"),
    _row("EDUCATION", "Education"),
    _row("EDUCATION_EDUCATIONAL_TECHNOLOGY", "Education", "Educational Technology"),
    _row("EDUCATION_HIGHER_EDUCATION", "Education", "Higher Education"),
    _row("EDUCATION_K12", "Education", "K-12"),
    _row("EDUCATION_LANGUAGE_COURSES", "Education", "Language Courses"),
    _row("EDUCATION_TRAINING", "Education", "Training"),
    _row("GAMES_AND_HOBBIES", "Games &amp; Hobbies"),
    _row("GAMES_AND_HOBBIES_AUTOMOTIVE", "Games &amp; Hobbies", "Automotive"),
    _row("GAMES_AND_HOBBIES_AVIATION", "Games &amp; Hobbies", "Aviation"),
    _row("GAMES_AND_HOBBIES_HOBBIES", "Games &amp; Hobbies", "Hobbies"),
    _row("GAMES_AND_HOBBIES_OTHER_GAMES", "Games &amp; Hobbies", "Other Games"),
    _row("GAMES_AND_HOBBIES_VIDEO_GAMES", "Games &amp; Hobbies", "Video Games"),
    _row("GOVERNMENT_ORGANIZATIONS", "Government &amp; Organizations"),
    _row("GOVERNMENT_ORGANIZATIONS_LOCAL", "Government &amp; Organizations", "Local"),
    _row("GOVERNMENT_ORGANIZATIONS_NATIONAL", "Government &amp; Organizations", "National"),
    _row("GOVERNMENT_ORGANIZATIONS_NONPROFIT", "Government &amp; Organizations", "Non-Profit"),
    _row("GOVERNMENT_ORGANIZATIONS_REGIONAL", "Government &amp; Organizations", "Regional"),
    _row("HEALTH", "Health"),
    _row("HEALTH_ALTERNATIVE_HEALTH", "Health", "Alternative Health"),
    _row("HEALTH_FITNESS_NUTRITION", "Health", "Fitness &amp; Nutrition"),
    _row("HEALTH_SELF_HELP", "Health", "Self-Help"),
    _row("HEALTH_SEXUALITY", "Health", "Sexuality"),
    _row("KIDS_AND_FAMILY", "Kids &amp; Family"),
    _row("MUSIC", "Music"),
    _row("NEWS_AND_POLITICS", "News &amp; Politics"),
    _row("RELIGION_AND_SPIRITUALITY", "Religion &amp; Spirituality"),
    _row("RELIGION_AND_SPIRITUALITY_BUDDHISM", "Religion &amp; Spirituality", "Buddhism"),
    _row("RELIGION_AND_SPIRITUALITY_CHRISTIANITY", "Religion &amp; Spirituality", "Christianity"),
    _row("RELIGION_AND_SPIRITUALITY_HINDUISM", "Religion &amp; Spirituality", "Hinduism"),
    _row("RELIGION_AND_SPIRITUALITY_ISLAM", "Religion &amp; Spirituality", "Islam"),
    _row("RELIGION_AND_SPIRITUALITY_JUDAISM", "Religion &amp; Spirituality", "Judaism"),
    _row("RELIGION_AND_SPIRITUALITY_OTHER", "Religion &amp; Spirituality", "Other"),
    _row("RELIGION_AND_SPIRITUALITY_SPIRITUALITY", "Religion &amp; Spirituality", "Spirituality"),
    _row("SCIENCE_MEDICINE", "Science &amp; Medicine"),
    _row("SCIENCE_MEDICINE_MEDICINE", "Science &amp; Medicine", "Medicine"),
    _row("SCIENCE_MEDICINE_NATURAL_SCIENCES", "Science &amp; Medicine", "Natural Sciences"),
    _row("SCIENCE_MEDICINE_SOCIAL_SCIENCES", "Science &amp; Medicine", "Social Sciences"),
    _row("SOCIETY_CULTURE", "Society &amp; Culture"),
    _row("SOCIETY_CULTURE_HISTORY", "Society &amp; Culture", "History"),
    _row("SOCIETY_CULTURE_PERSONAL_JOURNALS", "Society &amp; Culture", "Personal Journals"),
    _row("SOCIETY_CULTURE_PHILOSOPHY", "Society &amp; Culture", "Philosophy"),
    _row("SOCIETY_CULTURE_PLACES_AND_TRAVEL", "Society &amp; Culture", "Places &amp; Travel"),
    _row("SPORTS_AND_RECREATION", "Sports &amp; Recreation"),
    _row("SPORTS_AND_RECREATION_AMATEUR", "Sports &amp; Recreation", "Amateur"),
    _row(
        "SPORTS_AND_RECREATION_COLLEGE_AND_HIGH_SCHOOL",
        "Sports &amp; Recreation",
        "College &amp; High School",
    ),
    _row("SPORTS_AND_RECREATION_OUTDOOR", "Sports &amp; Recreation", "Outdoor"),
    _row("SPORTS_AND_RECREATION_PROFESSIONAL", "Sports &amp; Recreation", "Professional"),
    _row("TECHNOLOGY", "Technology"),
    _row("TECHNOLOGY_GADGETS", "Technology", "Gadgets"),
    _row("TECHNOLOGY_TECH_NEWS", "Technology", "Tech News"),
    _row("TECHNOLOGY_PODCASTING", "Technology", "Podcasting"),
    _row("TECHNOLOGY_SOFTWARE_HOWTO", "Technology", "Software How-To"),
    _row("TV_AND_FILM", "TV &amp; Film"),
    # Rows added by the 2019 revision of the Apple list
    _row("ARTS_BOOKS", "Arts", "Books"),
    _row("ARTS_FOOD_2019", "Arts", "Food"),
    _row("BUSINESS_ENTREPRENEURSHIP", "Business", "Entrepreneurship"),
    _row("BUSINESS_MANAGEMENT", "Business", "Management"),
    _row("BUSINESS_MARKETING", "Business", "Marketing"),
    _row("BUSINESS_NON_PROFIT", "Business", "Non-Profit"),
    _row("COMEDY_COMEDY_INTERVIEWS", "Comedy", "Comedy Interviews"),
    _row("COMEDY_IMPROV", "Comedy", "Improv"),
    _row("COMEDY_STAND_UP", "Comedy", "Stand-Up"),
    _row("EDUCATION_COURSES", "Education", "Courses"),
    _row("EDUCATION_HOW_TO", "Education", "How To"),
    _row("EDUCATION_LANGUAGE_LEARNING", "Education", "Language Learning"),
    _row("EDUCATION_SELF_IMPROVEMENT", "Education", "Self-Improvement"),
    _row("FICTION", "Fiction"),
    _row("FICTION_COMEDY_FICTION", "Fiction", "Comedy Fiction"),
    _row("FICTION_DRAMA", "Fiction", "Drama"),
    _row("FICTION_SCIENCE_FICTION", "Fiction", "Science Fiction"),
    _row("GOVERNMENT", "Government"),
    _row("HISTORY", "History"),
    _row("HEALTH_AND_FITNESS", "Health &amp; Fitness"),
    _row("HEALTH_AND_FITNESS_ALTERNATIVE_HEALTH", "Health &amp; Fitness", "Alternative Health"),
    _row("HEALTH_AND_FITNESS_FITNESS", "Health &amp; Fitness", "Fitness"),
    _row("HEALTH_AND_FITNESS_MEDICINE", "Health &amp; Fitness", "Medicine"),
    _row("HEALTH_AND_FITNESS_MENTAL_HEALTH", "Health &amp; Fitness", "Mental Health"),
    _row("HEALTH_AND_FITNESS_NUTRITION", "Health &amp; Fitness", "Nutrition"),
    _row("HEALTH_AND_FITNESS_SEXUALITY", "Health &amp; Fitness", "Sexuality"),
    _row("KIDS_AND_FAMILY_EDUCATION_FOR_KIDS", "Kids &amp; Family", "Education for Kids"),
    _row("KIDS_AND_FAMILY_PARENTING", "Kids &amp; Family", "Parenting"),
    _row("KIDS_AND_FAMILY_PETS_AND_ANIMALS", "Kids &amp; Family", "Pets &amp; Animals"),
    _row("KIDS_AND_FAMILY_STORIES_FOR_KIDS", "Kids &amp; Family", "Stories for Kids"),
    _row("LEISURE", "Leisure"),
    _row("LEISURE_ANIMATION_AND_MANGA", "Leisure", "Animation &amp; Manga"),
    _row("LEISURE_AUTOMOTIVE", "Leisure", "Automotive"),
    _row("LEISURE_AVIATION", "Leisure", "Aviation"),
    _row("LEISURE_CRAFTS", "Leisure", "Crafts"),
    _row("LEISURE_GAMES", "Leisure", "Games"),
    _row("LEISURE_HOBBIES", "Leisure", "Hobbies"),
    _row("LEISURE_HOME_AND_GARDEN", "Leisure", "Home &amp; Garden"),
    _row("LEISURE_VIDEO_GAMES", "Leisure", "Video Games"),
    _row("MUSIC_MUSIC_COMMENTARY", "Music", "Music Commentary"),
    _row("MUSIC_MUSIC_HISTORY", "Music", "Music History"),
    _row("MUSIC_MUSIC_INTERVIEWS", "Music", "Music Interviews"),
    _row("NEWS", "News"),
    _row("NEWS_BUSINESS_NEWS", "News", "Business News"),
    _row("NEWS_DAILY_NEWS", "News", "Daily News"),
    _row("NEWS_ENTERTAINMENT_NEWS", "News", "Entertainment News"),
    _row("NEWS_NEWS_COMMENTARY", "News", "News Commentary"),
    _row("NEWS_POLITICS", "News", "Politics"),
    _row("NEWS_SPORTS_NEWS", "News", "Sports News"),
    _row("NEWS_TECH_NEWS", "News", "Tech News"),
    _row("RELIGION_AND_SPIRITUALITY_RELIGION", "Religion &amp; Spirituality", "Religion"),
    _row("SCIENCE", "Science"),
    _row("SCIENCE_ASTRONOMY", "Science", "Astronomy"),
    _row("SCIENCE_CHEMISTRY", "Science", "Chemistry"),
    _row("SCIENCE_EARTH_SCIENCES", "Science", "Earth Sciences"),
    _row("SCIENCE_LIFE_SCIENCES", "Science", "Life Sciences"),
    _row("SCIENCE_MATHEMATICS", "Science", "Mathematics"),
    _row("SCIENCE_NATURAL_SCIENCES", "Science", "Natural Sciences"),
    _row("SCIENCE_NATURE", "Science", "Nature"),
    _row("SCIENCE_PHYSICS", "Science", "Physics"),
    _row("SCIENCE_SOCIAL_SCIENCES", "Science", "Social Sciences"),
    _row("SOCIETY_CULTURE_DOCUMENTARY", "Society &amp; Culture", "Documentary"),
    _row("SOCIETY_CULTURE_RELATIONSHIPS", "Society &amp; Culture", "Relationships"),
    _row("SPORTS", "Sports"),
    _row("SPORTS_BASEBALL", "Sports", "Baseball"),
    _row("SPORTS_BASKETBALL", "Sports", "Basketball"),
    _row("SPORTS_CRICKET", "Sports", "Cricket"),
    _row("SPORTS_FANTASY_SPORTS", "Sports", "Fantasy Sports"),
    _row("SPORTS_FOOTBALL", "Sports", "Football"),
    _row("SPORTS_GOLF", "Sports", "Golf"),
    _row("SPORTS_HOCKEY", "Sports", "Hockey"),
    _row("SPORTS_RUGBY", "Sports", "Rugby"),
    _row("SPORTS_RUNNING", "Sports", "Running"),
    _row("SPORTS_SOCCER", "Sports", "Soccer"),
    _row("SPORTS_SWIMMING", "Sports", "Swimming"),
    _row("SPORTS_TENNIS", "Sports", "Tennis"),
    _row("SPORTS_VOLLEYBALL", "Sports", "Volleyball"),
    _row("SPORTS_WILDERNESS", "Sports", "Wilderness"),
    _row("SPORTS_WRESTLING", "Sports", "Wrestling"),
    _row("TRUE_CRIME", "True Crime"),
    _row("TV_AND_FILM_AFTER_SHOWS", "TV &amp; Film", "After Shows"),
    _row("TV_AND_FILM_FILM_HISTORY", "TV &amp; Film", "Film History"),
    _row("TV_AND_FILM_FILM_INTERVIEWS", "TV &amp; Film", "Film Interviews"),
    _row("TV_AND_FILM_FILM_REVIEWS", "TV &amp; Film", "Film Reviews"),
    _row("TV_AND_FILM_TV_REVIEWS", "TV &amp; Film", "TV Reviews"),
)

_BY_NAME = {category.name: category for category in ITUNES_PODCAST_CATEGORIES}


def category_by(csv_category: str) -> ItunesPodcastCategory | None:
    """
    Find a category by its comma separated path.

    Args:
        csv_category: Path joined with commas, e.g. ``"Arts,Design"``.

    Returns:
        First matching row, or None when no row matches.
    """
    for category in ITUNES_PODCAST_CATEGORIES:
        if category.to_csv() == csv_category:
            return category
    return None


def category_named(name: str) -> ItunesPodcastCategory | None:
    """Find a category by its symbolic name, e.g. ``"ARTS_DESIGN"``."""
    return _BY_NAME.get(name)
