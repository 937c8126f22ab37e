"""
どこで: `engine.core` サブパッケージ。
何を: フレーム駆動（Tickable/FrameClock/IntervalTimer）と描画ウィンドウを提供。
なぜ: 時間の進め方を 1 箇所に集め、上位層（animation/render/api）から再利用可能にするため。
"""
