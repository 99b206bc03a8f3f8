"""Configuration settings for the class component transform"""
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Transform settings.

    Priority (highest to lowest):
    1. Environment variables (CLASS2OPTIONS_ prefix)
    2. .env file
    3. Default values
    """

    # Decorator names recognised on declarations and members
    COMPONENT_DECORATOR: str = "Component"
    PROP_DECORATOR: str = "Prop"
    WATCH_DECORATOR: str = "Watch"
    HOOK_DECORATOR: str = "Hook"

    # Fields starting with this prefix are framework internals ($refs, $el, ...)
    RESERVED_FIELD_SIGIL: str = "$"

    # Output shape: const Name = Base.extend({...})
    FACTORY_METHOD: str = "extend"
    # super.foo() -> Base.options.methods.foo.call(this)
    BASE_OPTIONS_ACCESSOR: str = "options"

    # Prepend name: 'ClassName' when the options object has no name
    INJECT_COMPONENT_NAME: bool = False

    # Re-raise declaration errors instead of recording them
    FAIL_FAST: bool = False

    class Config:
        env_prefix = "CLASS2OPTIONS_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"

    def decorator_names(self) -> tuple:
        """Names of the member decorators the transform understands."""
        return (self.PROP_DECORATOR, self.WATCH_DECORATOR, self.HOOK_DECORATOR)


# Global settings instance
settings = Settings()
