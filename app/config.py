from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    openai_api_key: str
    elevenlabs_api_key: str
    elevenlabs_voice_id: str
    hospital_url: str = "https://ammahospital.com/"
    transcription_model: str = "whisper-1"
    transcription_language: str = "te"
    completion_model: str = "gpt-3.5-turbo"
    completion_temperature: float = 0.5
    elevenlabs_model_id: str = "eleven_multilingual_v2"
    voice_stability: float = 0.5
    voice_similarity_boost: float = 0.75
    log_level: str = "INFO"
