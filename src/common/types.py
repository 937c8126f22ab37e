"""
どこで: `common` の型定義。
何を: Vec2/RGBA などの軽量エイリアス（組込みジェネリックで記述）。
なぜ: 依存の少ない場所に配置して循環と分散定義を避けるため。
"""

# 正規化座標 (x, y)。各軸 0..1、原点は左上
Vec2 = tuple[float, float]
# 色 (r, g, b, a)。各成分 0..1
RGBA = tuple[float, float, float, float]
