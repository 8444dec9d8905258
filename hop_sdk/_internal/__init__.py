"""Internal modules for the Hop SDK.

WARNING: These modules back the public SDK namespaces and are not
intended for direct use in application code.

Modules:
    rest - Endpoint descriptors, path templating and the request dispatcher
    requirements - Credential-kind checks run before dispatch
    http - Shared HTTP client configuration
    redaction - Redaction of sensitive values in debug output
"""
