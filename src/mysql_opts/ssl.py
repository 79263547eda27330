"""
SSL options.

The presence of an ``SslOpts`` on the options draft means TLS is required.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, SecretStr


class SslOpts(BaseModel):
    """
    TLS settings for the connection.

    Example::

        ssl_opts = (
            SslOpts()
            .with_pkcs12_path("/path/to/client.p12")
            .with_password("******")
        )
    """

    model_config = ConfigDict(frozen=True)

    pkcs12_path: Path | None = None
    password: SecretStr | None = None
    root_cert_path: Path | None = None
    skip_domain_validation: bool = False
    accept_invalid_certs: bool = False

    def with_pkcs12_path(self, pkcs12_path: str | Path | None) -> SslOpts:
        """Set the path to the pkcs12 archive (in ``der`` format)."""
        return self.model_copy(update={"pkcs12_path": Path(pkcs12_path) if pkcs12_path is not None else None})

    def with_password(self, password: str | None) -> SslOpts:
        """Set the password for the pkcs12 archive (defaults to ``None``)."""
        return self.model_copy(update={"password": SecretStr(password) if password is not None else None})

    def with_root_cert_path(self, root_cert_path: str | Path | None) -> SslOpts:
        """
        Set the path to a ``pem`` or ``der`` root certificate the connector will trust.

        Multiple certs are allowed in ``.pem`` files.
        """
        return self.model_copy(
            update={"root_cert_path": Path(root_cert_path) if root_cert_path is not None else None}
        )

    def with_danger_skip_domain_validation(self, value: bool) -> SslOpts:
        """Do not validate the server's domain name against its certificate."""
        return self.model_copy(update={"skip_domain_validation": value})

    def with_danger_accept_invalid_certs(self, value: bool) -> SslOpts:
        """Accept invalid certificates (expired, not trusted, ...)."""
        return self.model_copy(update={"accept_invalid_certs": value})

    def get_password(self) -> str | None:
        """Return the archive password in clear text."""
        return self.password.get_secret_value() if self.password is not None else None


__all__ = ["SslOpts"]
