"""Fixed sample list served when the live bestseller API is unavailable."""

from __future__ import annotations

from .models import BestsellerResult, Book

FALLBACK_NOTE = "Using fallback data due to API error"

FALLBACK_SOURCE_URLS = ["http://www.aladin.co.kr/shop/common/wbest.aspx"]

# (title, author, description, keyword, isbn, cover_url)
_FALLBACK_ROWS: list[tuple[str, str, str, str, str, str]] = [
    (
        "이해찬 회고록",
        "이해찬",
        "꿈이 모여 역사가 되다",
        "정치인",
        "9791191438826",
        "https://image.aladin.co.kr/product/30175/15/cover500/k442839798_1.jpg",
    ),
    (
        "눈과 돌멩이",
        "위수정 외",
        "2026년 제49회 이상문학상 작품집",
        "소설",
        "9791130674643",
        "https://image.aladin.co.kr/product/38496/16/cover500/k622135312_1.jpg",
    ),
    (
        "괴테는 모든 것을 말했다",
        "스즈키 유이",
        "제172회 아쿠타가와상 수상작",
        "소설",
        "9791194530701",
        "https://image.aladin.co.kr/product/37676/59/cover500/k212032349_3.jpg",
    ),
    (
        "돈의 방정식",
        "모건 하우젤",
        "돈을 지위와 성공의 기준, 그 이상으로 다루기 위한 21가지 이야기",
        "재테크",
        "9791193904671",
        "https://image.aladin.co.kr/product/38325/60/cover500/k952034340_2.jpg",
    ),
    (
        "떠난 것은 돌아오지 않는다",
        "줄리언 반스",
        "부커상 수상 작가의 마지막 소설",
        "소설",
        "9791130681009",
        "https://image.aladin.co.kr/product/38434/78/cover500/k232135794_2.jpg",
    ),
    (
        "퓨처 셀프",
        "벤저민 하디",
        "미래의 자신과 연결되어 현재를 변화시키는 방법",
        "자기계발",
        "9791140710225",
        "https://image.aladin.co.kr/product/32767/61/cover500/k232937637_1.jpg",
    ),
    (
        "역행자",
        "자청",
        "돈과 시간으로부터 자유로워지는 방법",
        "자기계발",
        "9791168473690",
        "https://image.aladin.co.kr/product/29354/32/cover500/k552835893_1.jpg",
    ),
    (
        "불편한 편의점",
        "김호연",
        "따뜻한 위로를 전하는 감동 소설",
        "소설",
        "9788936434267",
        "https://image.aladin.co.kr/product/27338/6/cover500/k222835565_1.jpg",
    ),
    (
        "트렌드 코리아 2026",
        "김난도",
        "2026년을 이끌 10가지 트렌드 키워드",
        "트렌드",
        "9788959897629",
        "https://image.aladin.co.kr/product/34951/47/cover500/k212935465_1.jpg",
    ),
    (
        "마흔에 읽는 니체",
        "장재형",
        "인생의 전환점에서 읽는 니체 철학",
        "철학",
        "9791156759034",
        "https://image.aladin.co.kr/product/11821/67/cover500/k672434296_1.jpg",
    ),
]


def fallback_books() -> list[Book]:
    """Return the sample books, ranked 1..10."""
    return [
        Book(
            title=title,
            author=author,
            description=description,
            rank=rank,
            keyword=keyword,
            isbn=isbn,
            cover_url=cover_url,
            cover_description=f"{title} book cover",
        )
        for rank, (title, author, description, keyword, isbn, cover_url) in enumerate(
            _FALLBACK_ROWS, start=1
        )
    ]


def fallback_result() -> BestsellerResult:
    """Build the degraded result served on any data-source failure."""
    return BestsellerResult(
        books=fallback_books(),
        source_urls=list(FALLBACK_SOURCE_URLS),
        note=FALLBACK_NOTE,
    )
