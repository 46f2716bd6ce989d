import os

from dotenv import load_dotenv

# Load environment variables from a .env file next to the working directory
load_dotenv()


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Config:
    # Character budgets per description type (the upper bound of a "good" length)
    DESCRIPTION_SEARCH_CHARS: int = int(os.getenv("DESCRIPTION_SEARCH_CHARS", "160"))
    DESCRIPTION_OPENGRAPH_CHARS: int = int(os.getenv("DESCRIPTION_OPENGRAPH_CHARS", "200"))
    DESCRIPTION_TWITTER_CHARS: int = int(os.getenv("DESCRIPTION_TWITTER_CHARS", "200"))

    # Generation settings
    AUTO_DESCRIPTION: bool = _env_bool("AUTO_DESCRIPTION", "true")

    @classmethod
    def budgets(cls) -> dict:
        return {
            "search": cls.DESCRIPTION_SEARCH_CHARS,
            "opengraph": cls.DESCRIPTION_OPENGRAPH_CHARS,
            "twitter": cls.DESCRIPTION_TWITTER_CHARS,
        }

    @classmethod
    def budget_for(cls, description_type) -> int:
        key = getattr(description_type, "value", description_type)
        return cls.budgets().get(key, cls.DESCRIPTION_SEARCH_CHARS)

    @classmethod
    def validate(cls) -> bool:
        return all(budget > 0 for budget in cls.budgets().values())
