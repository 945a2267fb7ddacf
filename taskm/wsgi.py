# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from taskm.app import create_app

app = create_app()


if __name__ == "__main__":
    app.run(host="0.0.0.0", port=3000, debug=False)
