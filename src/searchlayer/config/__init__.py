from searchlayer.config.settings import MeilisearchSettings, ObservabilitySettings, SearchSettings, Settings

__all__ = ["MeilisearchSettings", "ObservabilitySettings", "SearchSettings", "Settings"]
