"""Append an account to the credential file.

Usage: python scripts/create_user.py <username> <password>
"""
import sys
sys.path.insert(0, ".")

from cms.config import get_settings
from cms.kernel.errors import ValidationFailed
from cms.kernel.identity.credential_store import CredentialStore

if len(sys.argv) != 3:
    print(__doc__.strip())
    sys.exit(2)

username, password = sys.argv[1], sys.argv[2]
store = CredentialStore(get_settings().credentials_path)
try:
    store.register(username, password)
except ValidationFailed as e:
    print(e)
    sys.exit(1)
print(f"Created {username} in {store.path}")
