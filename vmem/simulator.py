import sys

from address_parser import AddressParser
from vmem.data_structures.backing_store import BackingStore
from vmem.engine import TranslationContext, TranslationEngine
from vmem.results import AccessLine


class VirtualMemorySimulator:
    """Runs a file of logical addresses through a fresh translation engine."""
    def __init__(self, config, out=None):
        self.config = config
        self.out = out if out is not None else sys.stdout
        self.context = None

    def simulate(self, backing_store_path, addresses_path, verbose=False):
        """
        Core simulator functionality, translates every address in the addresses file.
        :param backing_store_path: backing store file path
        :param addresses_path: addresses file path
        :param verbose: also print extended statistics
        :return: Statistics
        """
        addresses = AddressParser(addresses_path)
        with BackingStore(backing_store_path, page_size=self.config.pt.page_size) as backing_store:
            self.context = TranslationContext(self.config, backing_store)
            engine = TranslationEngine(self.context)
            for result in engine.translate_all(addresses):
                print(AccessLine(result), file=self.out)
        self.pprint_stats(verbose=verbose)
        return self.context.statistics

    def get_stats(self):
        """
        Gathers and returns stats from every part of the run.
        :return: dict of stats
        """
        ctx = self.context
        stats = ctx.statistics.as_dict()
        stats["tlb"] = ctx.tlb.get_stats()
        stats["page table"] = ctx.page_table.get_stats()
        stats["physical memory"] = ctx.physical_memory.get_stats()
        stats["free frames"] = ctx.frame_allocator.remaining
        stats["disk refs"] = ctx.backing_store.page_reads
        return stats

    def pprint_stats(self, verbose=False):
        """
        Prints the summary, and the extended stats when verbose.
        :return: None
        """
        stats = self.get_stats()
        stat_str = ""
        stat_str += f"Number of page faults: {stats['page faults']}\n"
        stat_str += f"Number of TLB hits: {stats['tlb hits']}\n"
        if verbose:
            stat_str += "\n"
            stat_str += "translated addresses : " + str(stats['translations']) + "\n"
            stat_str += "tlb misses           : " + str(stats['tlb misses']) + "\n"
            stat_str += "tlb hit rate         : " + f"{stats['tlb hit rate']:.6f}" + "\n"
            stat_str += "tlb evictions        : " + str(stats['tlb']['evictions']) + "\n"
            stat_str += "page fault rate      : " + f"{stats['page fault rate']:.6f}" + "\n"
            stat_str += "mapped pages         : " + str(stats['page table']['mapped pages']) + "\n"
            stat_str += "free frames          : " + str(stats['free frames']) + "\n"
            stat_str += "disk refs            : " + str(stats['disk refs']) + "\n"
        print(stat_str, end="", file=self.out)
