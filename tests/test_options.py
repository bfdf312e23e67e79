from datetime import timedelta

import pytest

from easyreq.options import (
    ConnectTimeout,
    HttpVersion,
    HttpVersionCode,
    LimitRate,
    PostRedirectFlags,
    Redirect,
    Timeout,
    UnixSocket,
    any_flags,
)


def test_timeout_from_int():
    assert Timeout(0).milliseconds() == 0
    assert Timeout(10000).milliseconds() == 10000


def test_timeout_from_timedelta_matches_int():
    assert Timeout(timedelta(milliseconds=10000)) == Timeout(10000)
    assert Timeout(timedelta(seconds=1.5)).milliseconds() == 1500


def test_connect_timeout_behaves_like_timeout():
    assert ConnectTimeout(timedelta(milliseconds=1)).milliseconds() == 1


def test_timeout_overflow():
    with pytest.raises(OverflowError, match="overflow"):
        Timeout(2**63).milliseconds()


def test_timeout_underflow():
    with pytest.raises(OverflowError, match="underflow"):
        Timeout(-(2**63) - 1).milliseconds()


def test_timeout_bounds_accepted():
    assert Timeout(2**63 - 1).milliseconds() == 2**63 - 1
    assert Timeout(-(2**63)).milliseconds() == -(2**63)


def test_timeout_rejects_bad_type():
    with pytest.raises(TypeError):
        Timeout("10")


def test_unix_socket_string():
    sock = UnixSocket("/tmp/app.sock")
    assert str(sock) == "/tmp/app.sock"
    assert sock == UnixSocket("/tmp/app.sock")


def test_limit_rate_fields():
    rate = LimitRate(1024, 2048)
    assert (rate.downrate, rate.uprate) == (1024, 2048)


def test_http_version_default():
    assert HttpVersion().code is HttpVersionCode.VERSION_NONE
    assert HttpVersion(HttpVersionCode.VERSION_2_0).code is HttpVersionCode.VERSION_2_0


def test_post_redirect_flags_all_combines_each():
    combined = PostRedirectFlags.POST_301 | PostRedirectFlags.POST_302 | PostRedirectFlags.POST_303
    redirect = Redirect(post_flags=combined)
    assert redirect.post_flags == PostRedirectFlags.POST_ALL
    assert any_flags(redirect.post_flags & PostRedirectFlags.POST_302)
    assert not any_flags(PostRedirectFlags.POST_ALL ^ PostRedirectFlags.POST_ALL)


def test_any_flags():
    assert not any_flags(PostRedirectFlags.NONE)
    assert any_flags(PostRedirectFlags.POST_303)
    assert not any_flags(PostRedirectFlags.POST_301 & PostRedirectFlags.POST_302)


def test_redirect_defaults():
    redirect = Redirect()
    assert redirect.maximum == 50
    assert redirect.follow is True
    assert redirect.cont_send_cred is False
    assert redirect.post_flags == PostRedirectFlags.POST_ALL


def test_redirect_partial_overrides():
    assert Redirect(follow=False).maximum == 50
    assert Redirect(maximum=0).follow is True
    redirect = Redirect(follow=True, cont_send_cred=True)
    assert redirect.cont_send_cred is True