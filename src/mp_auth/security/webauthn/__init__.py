"""Security – WebAuthn authenticator metadata."""
