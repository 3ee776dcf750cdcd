"""
config.py - Tag Cloud Settings

Wraps a ConfigParser loaded from config.ini. Every key has a default,
so an empty parser (missing file) yields a usable configuration.
"""


class Config(object):
    def __init__(self, config):
        """
        Args:
            config: ConfigParser with optional [TAG CLOUD], [INPUT]
                and [LOGGING] sections
        """
        cloud = config["TAG CLOUD"] if config.has_section("TAG CLOUD") else {}
        source = config["INPUT"] if config.has_section("INPUT") else {}
        log_section = config["LOGGING"] if config.has_section("LOGGING") else {}

        self.min_font = int(cloud.get("MINFONT", "11"))
        self.max_font = int(cloud.get("MAXFONT", "48"))
        if self.min_font > self.max_font:
            raise ValueError(
                f"MINFONT ({self.min_font}) is larger than MAXFONT ({self.max_font}).")
        self.stylesheet = cloud.get("STYLESHEET", "doc/tagcloud.css").strip()
        self.inline_style = cloud.get("INLINESTYLE", "true").strip().lower() in {"1", "yes", "true", "on"}

        self.encoding = source.get("ENCODING", "utf-8").strip()
        self.log_dir = log_section.get("LOGDIR", "Logs").strip()
