"""Helpers for characters, strings, numbers, words, memory, output and linked lists."""