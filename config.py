import hydra
from omegaconf import DictConfig

global_config: DictConfig | None = None


def load_config(config_name: str = "config", overrides: list[str] | None = None) -> DictConfig:
    with hydra.initialize(config_path="conf", version_base=None):
        return hydra.compose(config_name, overrides=overrides or [])


def get_client_config() -> DictConfig:
    """
    Return the process-wide client configuration, composing it on first use.
    """
    global global_config
    if global_config is None:
        global_config = load_config()
    return global_config
