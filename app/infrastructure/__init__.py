"""Infrastructure modules for the localization engine.

Centralized infrastructure components:
- configuration: Settings management (Settings, I18nSettings)
- logging: Structured logging (configure_logging, get_module_logger)
- operations: Operation results (OperationResult, OperationStatus)
- persistence: Durable preference storage
- i18n: Localization engine (catalogs, active language, key resolution)
- services: Application-scoped providers (get_settings, get_i18n_service)
"""
