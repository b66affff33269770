"""
Per-user, per-action authenticity tokens.

A token is valid for the tick it was created in and the one before, each tick
lasting half of NONCE_LIFETIME.
"""
import math
import time

from django.conf import settings
from django.utils.crypto import constant_time_compare, salted_hmac

KEY_SALT = 'framework.nonces'
TOKEN_LENGTH = 12


def nonce_tick():
    return math.ceil(time.time() / (settings.NONCE_LIFETIME / 2))


def _user_key(user):
    if user is None or not user.is_authenticated:
        return ''
    return str(user.pk)


def _make_token(tick, action, user):
    value = f'{tick}|{action}|{_user_key(user)}'
    return salted_hmac(KEY_SALT, value).hexdigest()[-TOKEN_LENGTH:]


def create_nonce(action, user):
    return _make_token(nonce_tick(), action, user)


def verify_nonce(nonce, action, user):
    """Returns 1 if created in the current tick, 2 if in the previous one, False otherwise."""
    if not nonce:
        return False

    tick = nonce_tick()
    if constant_time_compare(_make_token(tick, action, user), nonce):
        return 1
    if constant_time_compare(_make_token(tick - 1, action, user), nonce):
        return 2
    return False


def item_action(item_id):
    return f'update-item-{item_id}'
