from malpy.builtin.env_builtin import NATIVE_FUNCTIONS, create_global_env, default_registry

__all__ = ["NATIVE_FUNCTIONS", "create_global_env", "default_registry"]
