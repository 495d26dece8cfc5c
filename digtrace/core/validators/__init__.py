from digtrace.core.validators.sanitizer import (
    sanitize_domain,
    validate_hostname,
)

__all__ = ["sanitize_domain", "validate_hostname"]
