"""
どこで: `common` パッケージ。
何を: ロギング/環境変数/設定/イージングなど、エンジンと API の双方で使う軽量ユーティリティ。
なぜ: GUI 依存のない共通基盤を分離し、依存の向きを単純化するため。
"""
