"""
Domain Layer

包含應用程序的核心領域模型和業務邏輯，按功能領域分為多個子模塊：

- common: 各領域共用的基礎模型與結果包裝
- coordinates: 經緯度、DMS 與 UTM 之間的座標轉換
"""
