from core.rendering.avatar import gravatar_url

TEST_EMAIL_HASH = "55502f40dc8b7c769880b10874abc9d0"
EMPTY_HASH = "d41d8cd98f00b204e9800998ecf8427e"


def test_gravatar_url_hashes_normalized_email():
    expected = f"https://www.gravatar.com/avatar/{TEST_EMAIL_HASH}?s=40&d=identicon"

    assert gravatar_url("test@example.com") == expected
    assert gravatar_url("  Test@Example.COM ") == expected


def test_gravatar_url_missing_email_hashes_empty_string():
    assert gravatar_url(None).startswith(f"https://www.gravatar.com/avatar/{EMPTY_HASH}?")


def test_gravatar_url_custom_mirror_size_and_default():
    url = gravatar_url(
        "test@example.com",
        80,
        base_url="https://cravatar.example.org/avatar/",
        default="mp",
    )
    assert url == f"https://cravatar.example.org/avatar/{TEST_EMAIL_HASH}?s=80&d=mp"
