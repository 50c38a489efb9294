"""
ワイルドカードマッチング

`*` のみをサポートするglob形式のパターンマッチングを提供します。
大文字小文字は区別しません（ASCIIのみ小文字化）。
"""


def ascii_lower(text: str) -> str:
    """ASCIIの英大文字のみを小文字化（それ以外の文字はそのまま）"""
    return ''.join(chr(ord(c) + 32) if 'A' <= c <= 'Z' else c for c in text)


def match_wildcard(pattern: str, candidate: str) -> bool:
    """
    文字列がワイルドカードパターンに一致するか判定

    `*` は0文字以上の任意の文字列に一致し、それ以外の文字はリテラルとして
    同じ位置の文字と比較されます。`?` や文字クラスはサポートしません。

    Args:
        pattern: ワイルドカードパターン（空文字列は常に一致）
        candidate: 判定対象の文字列

    Returns:
        一致する場合True
    """
    if not pattern or pattern == '*':
        return True

    pattern = ascii_lower(pattern)
    candidate = ascii_lower(candidate)

    p = 0
    t = 0
    star_idx = -1  # 直前の * の位置
    match_idx = 0  # その * に対応させ始めた候補文字列の位置

    while t < len(candidate):
        if p < len(pattern) and pattern[p] == '*':
            star_idx = p
            match_idx = t
            p += 1
        elif p < len(pattern) and pattern[p] == candidate[t]:
            p += 1
            t += 1
        elif star_idx != -1:
            # バックトラック: * に1文字多く吸収させる
            p = star_idx + 1
            match_idx += 1
            t = match_idx
        else:
            return False

    while p < len(pattern) and pattern[p] == '*':
        p += 1

    return p == len(pattern)
