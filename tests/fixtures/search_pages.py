"""검색 결과 페이지 HTML 스냅샷 (엔진 독립)

- 단순 문자열만 보관
- pytest fixture 선언하지 않음
"""

BASE_URL = "https://www.amazon.in/"

HOME_PAGE = """
<html><head><title>Online Shopping</title></head>
<body>
  <form id="nav-search-bar-form">
    <input type="text" id="twotabsearchtextbox" name="field-keywords">
  </form>
</body></html>
"""

# 카드 순서:
# 1) 모든 필드 존재 (정수부에 소수점 span 포함)
# 2) 소수부 없음 / 별점·리뷰 없음 / 프로토콜-상대 이미지
# 3) 제목 없음 (다른 필드는 모두 존재) -> 제외 대상
# 4) 가격 없음 / 이미지 없음 / h2 > span 제목 (a 태그 없음)
SEARCH_RESULTS_PAGE = """
<html><body>
<div class="s-main-slot s-result-list">
  <div class="s-result-item" data-asin="B0CHX1W1XY">
    <h2><a href="/dp/B0CHX1W1XY"><span>Apple iPhone 15 (128 GB) - Black</span></a></h2>
    <span class="a-price">
      <span class="a-price-symbol">₹</span><span class="a-price-whole">1,299<span class="a-price-decimal">.</span></span><span class="a-price-fraction">99</span>
    </span>
    <i class="a-icon a-icon-star-small"><span class="a-icon-alt">4.5 out of 5 stars</span></i>
    <span class="a-size-base s-underline-text">12,345</span>
    <img class="s-image" src="https://m.media-amazon.com/images/I/71d7rfSl0wL._AC_UL320_.jpg">
  </div>
  <div class="s-result-item" data-asin="B0BDK62PDX">
    <h2><a href="/dp/B0BDK62PDX"><span>
        boAt Rockerz 255 Pro+
        Bluetooth Neckband
    </span></a></h2>
    <span class="a-price"><span class="a-price-whole">499</span></span>
    <img class="s-image" src="//m.media-amazon.com/images/I/61dWc9U8hYL._AC_UL320_.jpg">
  </div>
  <div class="s-result-item" data-asin="">
    <span class="a-price"><span class="a-price-whole">999</span><span class="a-price-fraction">00</span></span>
    <i class="a-icon"><span class="a-icon-alt">3.9 out of 5 stars</span></i>
    <span class="a-size-base s-underline-text">87</span>
    <img class="s-image" src="https://m.media-amazon.com/images/I/sponsored.jpg">
  </div>
  <div class="s-result-item" data-asin="B09XYZ1234">
    <h2><span>Samsung Galaxy M14 5G</span></h2>
    <i class="a-icon"><span class="a-icon-alt">4.1 out of 5 stars</span></i>
    <span class="a-size-base s-underline-text">2,001</span>
  </div>
</div>
</body></html>
"""

# 결과 카드 0건
EMPTY_RESULTS_PAGE = """
<html><body>
<div class="s-main-slot s-result-list">
  <div class="s-no-outline"><span>No results for xqzv.</span></div>
</div>
</body></html>
"""

# 카드는 있지만 전부 제목 없음
TITLELESS_RESULTS_PAGE = """
<html><body>
<div class="s-main-slot">
  <div class="s-result-item"><span class="a-price"><span class="a-price-whole">10</span></span></div>
  <div class="s-result-item"><img class="s-image" src="https://m.media-amazon.com/x.jpg"></div>
</div>
</body></html>
"""

# 결과 리스트 바깥의 카드는 무시
CARD_OUTSIDE_MAIN_SLOT_PAGE = """
<html><body>
<div class="s-result-item"><h2><a><span>Outside card</span></a></h2></div>
<div class="s-main-slot">
  <div class="s-result-item"><h2><a><span>Inside card</span></a></h2></div>
</div>
</body></html>
"""

EXAMPLE_DOMAIN_PAGE = """
<html><head><title>Example Domain</title></head>
<body><div><h1>  Example
  Domain </h1><p>This domain is for use in illustrative examples.</p></div></body></html>
"""
