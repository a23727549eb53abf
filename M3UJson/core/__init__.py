# 19.10.26
