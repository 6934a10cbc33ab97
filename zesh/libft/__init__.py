"""String, number, memory, list and output helpers."""