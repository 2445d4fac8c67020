import pygame
from engine.input import is_quit, is_toggle_debug, to_resize_event

def test_videoresize_becomes_primary_resize():
    e = pygame.event.Event(pygame.VIDEORESIZE, w=1024, h=768, size=(1024, 768))
    ev = to_resize_event(e)
    assert (ev.width, ev.height) == (1024.0, 768.0)
    assert ev.is_primary

def test_other_events_are_not_resizes():
    e = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_a)
    assert to_resize_event(e) is None

def test_key_predicates():
    esc = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE)
    f3 = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_F3)
    assert is_quit(esc) and not is_quit(f3)
    assert is_toggle_debug(f3) and not is_toggle_debug(esc)
