import pygame
from data.schema import ResizeEvent

def is_quit(e):
    return (e.type==pygame.KEYDOWN and e.key==pygame.K_ESCAPE)

def is_toggle_debug(e):
    return (e.type==pygame.KEYDOWN and e.key==pygame.K_F3)

def to_resize_event(e):
    # VIDEORESIZE is only posted for the display window
    if e.type==pygame.VIDEORESIZE:
        return ResizeEvent(float(e.w), float(e.h), window_id=0, is_primary=True)
    return None
