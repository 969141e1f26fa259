from trailio.utils.formatting import (
    clean_video_title,
    format_media_title,
    format_stream_label,
    parse_duration,
)


def test_clean_video_title_removes_bracketed_tags():
    assert clean_video_title("Official Trailer [HD] [Subtitled]  ") == "Official Trailer"
    assert clean_video_title("  [4K] Teaser  ") == "Teaser"
    assert clean_video_title("") == ""
    assert clean_video_title(None) == ""


def test_parse_duration():
    assert parse_duration("1:02:03") == 3723
    assert parse_duration("4:05") == 245
    assert parse_duration("59") == 59
    assert parse_duration("1:xx:10") == 3610
    assert parse_duration("") == 0
    assert parse_duration(None) == 0
    assert parse_duration(90) == 90


def test_format_media_title():
    assert format_media_title("The Shawshank Redemption", "1994") == "The Shawshank Redemption (1994)"
    assert format_media_title("Breaking Bad", "") == "Breaking Bad"
    assert format_media_title("", "1994") == ""


def test_stream_label_with_known_title():
    label = format_stream_label(
        "🎬 Trailer",
        "The Shawshank Redemption",
        "1994",
        "The Shawshank Redemption - Official Trailer [HD]",
    )
    assert label == (
        "🎬 Trailer: The Shawshank Redemption (1994)\n"
        "The Shawshank Redemption - Official Trailer"
    )


def test_stream_label_falls_back_to_video_title():
    assert format_stream_label("🎬 Trailer", "", "", "Final Trailer [4K]") == "🎬 Trailer: Final Trailer"
    assert format_stream_label("🎬 Trailer", "", "", "") == "🎬 Trailer"
