from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_prefix": "SOUNDTOUCH_"}

    tts_language: str = "EN"
    tts_base_url: str = "http://translate.google.com/translate_tts"
    log_level: str = "INFO"
    log_json: bool = False
    # level for the soundtouch_api.* loggers, independent of the root level
    package_log_level: str = "INFO"


settings = Settings()
