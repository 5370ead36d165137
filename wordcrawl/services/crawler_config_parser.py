from wordcrawl.domain.config import CrawlerConfig
from wordcrawl.exceptions import ConfigurationError

# camelCase keys as written in config files, with snake_case aliases
_KEYS = {
    "start_pages": ("startPages", "start_pages"),
    "ignored_urls": ("ignoredUrls", "ignored_urls"),
    "ignored_words": ("ignoredWords", "ignored_words"),
    "parallelism": ("parallelism",),
    "max_depth": ("maxDepth", "max_depth"),
    "timeout": ("timeoutSeconds", "timeout_seconds"),
    "popular_word_count": ("popularWordCount", "popular_word_count"),
    "profile_output_path": ("profileOutputPath", "profile_output_path"),
    "result_path": ("resultPath", "result_path"),
}


class CrawlerConfigParser:
    """Parse a YAML dict into a CrawlerConfig.

    Responsibility: key mapping and schema checks for config files.
    It does NOT perform filesystem IO. Unknown keys (such as
    `implementationOverride`) are ignored.
    """

    def parse(self, *, data: dict) -> CrawlerConfig:
        if not isinstance(data, dict):
            raise ConfigurationError("<root>", "config must be a mapping")

        kwargs = {}
        for name, keys in _KEYS.items():
            for key in keys:
                if key in data and data[key] is not None:
                    kwargs[name] = data[key]
                    break

        for name in ("start_pages", "ignored_urls", "ignored_words"):
            value = kwargs.get(name)
            if value is not None and not isinstance(value, list):
                raise ConfigurationError(_KEYS[name][0], "must be a list")

        for name in ("profile_output_path", "result_path"):
            value = kwargs.get(name)
            if value is not None and not isinstance(value, str):
                raise ConfigurationError(_KEYS[name][0], "must be a path string")
            if value == "":
                del kwargs[name]

        return CrawlerConfig(**kwargs)
