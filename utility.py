#!/usr/bin/python3
# -*- coding: UTF-8 -*-
# utility.py - Helper functions

def userChoice(options, prompt="Your selection: "):
    print(" -=-= Choose One =-=- ")
    for i in range(len(options)):
        print("[{}] : {}".format(i+1, options[i]))
    while True:
        answer = input(prompt)
        try:
            j = int(answer)
        except ValueError:
            print("Sorry: '{}' isn't a number.".format(answer))
            continue
        if 1 <= j <= len(options):
            break
    # Return the user's integer choice (1-N)
    # but subtract one because options[] is zero-indexed.
    return options[j-1]
