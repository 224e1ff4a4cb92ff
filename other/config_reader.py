import os

from pydantic_settings import BaseSettings, SettingsConfigDict
from stellar_sdk import Network

start_path = os.path.dirname(os.path.dirname(__file__))
dotenv_path = os.path.join(start_path, '.env')

horizont_urls = [
    'https://horizon.stellar.org',
    'https://horizon.stellar.lobstr.co',
]


class Settings(BaseSettings):
    horizon_url: str = horizont_urls[0]
    network_passphrase: str = Network.PUBLIC_NETWORK_PASSPHRASE
    # the hash is appended as is
    transaction_link_base: str = 'https://horizon.stellar.org/transactions/'
    lobstr_vault_url: str = 'https://vault.lobstr.co/api/transactions/'
    request_timeout: int = 30

    model_config = SettingsConfigDict(
        env_file=dotenv_path,
        env_file_encoding='utf-8',
        extra='allow',
        case_sensitive=False,
        protected_namespaces=()
    )


config = Settings()
