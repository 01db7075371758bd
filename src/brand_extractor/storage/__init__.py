from .json_files import load_json, load_brand_config, load_known_brands, write_json

__all__ = ["load_json", "load_brand_config", "load_known_brands", "write_json"]
