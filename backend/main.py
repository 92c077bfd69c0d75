"""
启动服务

    python main.py              开发模式，代码改动自动重载
    RELOAD=0 python main.py     关闭自动重载
HOST / PORT 环境变量指定监听地址，默认只监听本机 8000 端口。
"""
import os

import uvicorn

if __name__ == "__main__":
    uvicorn.run(
        "bizform.main:app",
        host=os.getenv("HOST", "127.0.0.1"),
        port=int(os.getenv("PORT", "8000")),
        reload=os.getenv("RELOAD", "1") != "0",
        log_level="info",
    )
